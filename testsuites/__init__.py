"""
Test suites package.

`testsuites` stays importable to support:
  - programmatic runners (`run_tests.py --orchestrate`)
  - unit tests importing the framework and suite definitions
  - IDE navigation

The live suite targets the public Guru99 demo site; nothing here holds secrets.
"""
