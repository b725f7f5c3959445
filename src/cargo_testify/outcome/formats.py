#
# src/cargo_testify/outcome/formats.py
#
"""
Patterns describing the human-readable output of `cargo test`.

The test runner offers no machine-readable result channel, so outcomes are
recognised from its terminal text. Each supported text layout is captured as a
versioned OutputFormat; a change in the runner's wording means a new format
here and nowhere else.
"""

import re

from attrs import define, field


@define(frozen=True, slots=True)
class OutputFormat:
    """A named pair of patterns recognising a summary line and a compiler error."""

    version: str
    result_pattern: re.Pattern[str] = field(converter=re.compile)
    error_pattern: re.Pattern[str] = field(converter=re.compile)

    def find_summary(self, text: str) -> str | None:
        """Returns the first summary-line match in `text`, if any."""
        match = self.result_pattern.search(text)
        return match.group(0) if match else None

    def find_error(self, text: str) -> str | None:
        """Returns the first compiler-error match in `text`, if any."""
        match = self.error_pattern.search(text)
        return match.group(0) if match else None


# "test result: ok. 3 passed; 0 failed; 0 ignored; 0 measured; 0 filtered out"
# "error[E0308]: mismatched types" / "error: could not compile `foo`"
CARGO_TEST_V1 = OutputFormat(
    version="cargo-test/1",
    result_pattern=r"\d+ passed.*filtered out",
    error_pattern=re.compile(r"^error(?::|\[).*", re.MULTILINE),
)

DEFAULT_FORMAT = CARGO_TEST_V1

# 🔼⚙️
