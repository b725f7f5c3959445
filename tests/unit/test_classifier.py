# tests/unit/test_classifier.py

"""Unit tests for outcome classification and the cargo test output format."""

import pytest

from cargo_testify.exceptions import ClassificationError
from cargo_testify.outcome import (
    CARGO_TEST_V1,
    CompileError,
    OutputFormat,
    TestsFailed,
    TestsPassed,
    classify,
    classify_result,
)
from cargo_testify.runner import RunResult

PASSED_SUMMARY = "3 passed; 0 failed; 0 ignored; 0 measured; 0 filtered out"
FAILED_SUMMARY = "1 passed; 1 failed; 0 ignored; 0 measured; 0 filtered out"

CARGO_PASS_STDOUT = f"""
running 3 tests
test tests::one ... ok
test tests::two ... ok
test tests::three ... ok

test result: ok. {PASSED_SUMMARY}; finished in 0.00s

"""

CARGO_FAIL_STDOUT = f"""
running 2 tests
test tests::good ... ok
test tests::bad ... FAILED

failures:

---- tests::bad stdout ----
thread 'tests::bad' panicked at src/lib.rs:10:9

test result: FAILED. {FAILED_SUMMARY}; finished in 0.00s

"""

CARGO_COMPILE_STDERR = """   Compiling demo v0.1.0 (/project)
error[E0308]: mismatched types
 --> src/lib.rs:1:24
  |
1 | pub fn answer() -> u32 { "42" }
  |                        ^^^^ expected `u32`, found `&str`

error: could not compile `demo` (lib) due to 1 previous error
"""


class TestScenarios:
    """The concrete scenarios the classifier must reproduce exactly."""

    def test_bare_passing_summary(self):
        outcome = classify(True, PASSED_SUMMARY, "")
        assert outcome == TestsPassed(PASSED_SUMMARY)

    def test_bare_failing_summary(self):
        outcome = classify(False, FAILED_SUMMARY, "")
        assert outcome == TestsFailed(FAILED_SUMMARY)

    def test_bare_compiler_error(self):
        outcome = classify(False, "", "error[E0308]: mismatched types")
        assert outcome == CompileError("error[E0308]: mismatched types")


class TestClassify:
    def test_passed_from_real_cargo_output(self):
        assert classify(True, CARGO_PASS_STDOUT, "") == TestsPassed(PASSED_SUMMARY)

    def test_passed_ignores_stderr(self):
        stderr = "warning: unused variable\nerror: this is not a compile failure\n"
        assert classify(True, CARGO_PASS_STDOUT, stderr) == TestsPassed(PASSED_SUMMARY)

    def test_failed_from_real_cargo_output(self):
        assert classify(False, CARGO_FAIL_STDOUT, "") == TestsFailed(FAILED_SUMMARY)

    def test_stdout_summary_takes_precedence_over_stderr_error(self):
        stderr = "error: test failed, to rerun pass `--lib`\n"
        assert classify(False, CARGO_FAIL_STDOUT, stderr) == TestsFailed(FAILED_SUMMARY)

    def test_compile_error_uses_first_error_line(self):
        outcome = classify(False, "", CARGO_COMPILE_STDERR)
        assert outcome == CompileError("error[E0308]: mismatched types")

    def test_compile_error_with_plain_error_prefix(self):
        outcome = classify(False, "", "   Compiling demo\nerror: could not find `Cargo.toml`\n")
        assert outcome == CompileError("error: could not find `Cargo.toml`")

    def test_first_summary_wins_for_multiple_test_binaries(self):
        stdout = (
            "test result: ok. 2 passed; 0 failed; 0 ignored; 0 measured; 0 filtered out\n"
            "test result: FAILED. 0 passed; 1 failed; 0 ignored; 0 measured; 0 filtered out\n"
        )
        outcome = classify(False, stdout, "")
        assert outcome == TestsFailed("2 passed; 0 failed; 0 ignored; 0 measured; 0 filtered out")

    def test_error_must_begin_a_line(self):
        stderr = "note: an error: in the middle does not count\n"
        with pytest.raises(ClassificationError):
            classify(False, "", stderr)

    def test_success_without_summary_is_an_error(self):
        with pytest.raises(ClassificationError) as exc_info:
            classify(True, "running 0 tests\n", "")
        assert exc_info.value.format_version == CARGO_TEST_V1.version

    def test_failure_without_any_pattern_is_an_error(self):
        with pytest.raises(ClassificationError):
            classify(False, "something odd happened\n", "Killed\n")

    def test_classify_result(self):
        result = RunResult(success=False, exit_code=101, stdout=CARGO_FAIL_STDOUT, stderr="")
        assert classify_result(result) == TestsFailed(FAILED_SUMMARY)

    def test_custom_output_format(self):
        fmt = OutputFormat(
            version="custom/1",
            result_pattern=r"TOTAL: \d+ ok",
            error_pattern=r"(?m)^FATAL.*",
        )
        assert classify(True, "... TOTAL: 5 ok\n", "", fmt) == TestsPassed("TOTAL: 5 ok")
        assert classify(False, "", "FATAL boom\n", fmt) == CompileError("FATAL boom")


class TestOutcomeTitles:
    def test_titles(self):
        assert TestsPassed("x").title == "Tests passed"
        assert TestsFailed("x").title == "Tests failed"
        assert CompileError("x").title == "Compilation error"
