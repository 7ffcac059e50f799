import builtins

import pytest


@pytest.fixture
def feed_input(monkeypatch):
    """Replace builtins.input with a scripted sequence of lines.

    Running out of lines raises EOFError, like a closed stdin. The prompts
    that were shown are collected on the returned list.
    """
    prompts = []

    def _feed(*lines):
        remaining = iter(lines)

        def fake_input(prompt=''):
            prompts.append(prompt)
            try:
                return next(remaining)
            except StopIteration:
                raise EOFError
        monkeypatch.setattr(builtins, 'input', fake_input)
        return prompts
    return _feed

@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    outcome = yield
    report = outcome.get_result()
    if report.when == "call":
        print(f"TEST: {item.name} - {'PASSED' if report.passed else 'FAILED'}")
