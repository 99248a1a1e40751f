"""runreport: NUnit v2 and JUnit XML reports for completed test runs."""

__version__ = "0.1.0"
