# src/cargo_testify/cli/__init__.py
