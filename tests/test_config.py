"""Test the configuration module functionality."""

from apsp.config import SOLVER_CONFIG, SolverConfig


def test_solver_config_defaults():
    """Test that the default configuration values are correct."""
    config = SolverConfig()

    assert config.inf == 9999
    assert config.validate is True
    assert config.cell_width == 7


def test_resolve_inf():
    """Explicit sentinels win over the configured one."""
    config = SolverConfig(inf=100)

    assert config.resolve_inf() == 100
    assert config.resolve_inf(None) == 100
    assert config.resolve_inf(5) == 5
    assert config.resolve_inf(0) == 0


def test_global_config_instance():
    """Test that the global SOLVER_CONFIG instance carries the defaults."""
    assert SOLVER_CONFIG.inf == 9999
    assert SOLVER_CONFIG.resolve_inf() == 9999


def test_custom_config():
    custom_config = SolverConfig(inf=2**31 - 1, validate=False, cell_width=12)

    assert custom_config.inf == 2**31 - 1
    assert custom_config.validate is False
    assert custom_config.cell_width == 12
