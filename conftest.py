from pytest_allclose import report_rmses

from trigm.rc import rc


def pytest_runtest_setup(item):
    rc.reload_rc([])


def pytest_terminal_summary(terminalreporter):
    report_rmses(terminalreporter)
