import pytest

from symbolic_calculus import constant, variable, add, multiply
from symbolic_calculus.logging_system import LogLevel, configure_logging


@pytest.fixture(autouse=True)
def silent_logging():
    """Keep the global logger quiet unless a test configures it."""
    configure_logging(log_level=LogLevel.SILENT)
    yield
    configure_logging(log_level=LogLevel.SILENT)


@pytest.fixture
def linear_sum():
    """f(x) = x + 2x"""
    return add(variable(), multiply(constant(2), variable()))


@pytest.fixture
def square():
    """g(x) = x * x"""
    return multiply(variable(), variable())


@pytest.fixture
def sample_expressions():
    """A spread of tree shapes used by property-style tests."""
    x = variable
    c = constant
    return [
        c(4.0),
        x(),
        add(x(), c(1)),
        multiply(c(3), x()),
        multiply(x(), c(3)),
        add(multiply(c(2), x()), multiply(c(5), x())),
        multiply(add(x(), c(1)), add(x(), c(-1))),
        multiply(multiply(x(), x()), x()),
        add(multiply(c(0.5), multiply(x(), x())), add(x(), c(7))),
        multiply(add(multiply(c(2), x()), c(3)), multiply(x(), add(x(), c(2)))),
    ]
