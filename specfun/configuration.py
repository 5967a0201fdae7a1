"""Contains the runtime configuration of specfun.

This consists of two parts, functions to get the current runtime settings and configuration actions to update these
settings. To set a new configuration, create a new :py:class:`ConfigAction` and use this within a context environment
using :py:func:`config_context`. Example:

.. code-block:: python

    from specfun.configuration import RuntimeConfigurationAction, config_context

    with config_context(RuntimeConfigurationAction(double_precision=False)):
        ...

The configuration only determines the precision used for Python builtin inputs. Numpy inputs are always evaluated
in their own precision.

The configuration is held in a context variable, changes made in one thread (or asyncio task) are not seen by
other threads.
"""
import logging
from contextlib import contextmanager
from contextvars import ContextVar

__author__ = 'Robbert Harms'
__date__ = "2024-02-12"
__maintainer__ = "Robbert Harms"
__email__ = "robbert.harms@maastrichtuniversity.nl"


_logger = logging.getLogger(__name__)


"""The runtime configuration, this can be overwritten at run time.

The stored dictionaries are never modified in place, every change sets a new dictionary.
"""
_config = ContextVar('specfun_config', default={
    'double_precision': True
})

# the tokens to restore the configuration with, one for every applied SimpleConfigAction
_applied_tokens = ContextVar('specfun_applied_config_tokens', default=())


def use_double_precision():
    """Check if we evaluate Python numbers in double precision or not.

    Returns:
        boolean: if we run the computations in double precision or not
    """
    return _config.get()['double_precision']


def set_use_double_precision(double_precision):
    """Set the default use of double precision.

    Please note that this will change the configuration of the current thread, i.e. this is a persistent change. If
    you do not want a persistent state change, consider using :func:`~specfun.configuration.config_context` instead.

    Args:
        double_precision (boolean): if we use double precision by default or not
    """
    _logger.debug('Setting the default precision to {}.'.format('double' if double_precision else 'single'))
    _update_config(double_precision=bool(double_precision))


def get_default_numeric_type():
    """Get the real numeric type used for Python numbers.

    Returns:
        specfun.lib.numeric_types.RealType: single or double precision, depending on the configuration
    """
    from specfun.lib.numeric_types import Float32, Float64
    if use_double_precision():
        return Float64
    return Float32


def get_default_complex_type():
    """Get the complex numeric type used for Python complex numbers.

    Returns:
        specfun.lib.numeric_types.ComplexType: the complex type matching :func:`get_default_numeric_type`
    """
    from specfun.lib.numeric_types import Complex64, Complex128
    if use_double_precision():
        return Complex128
    return Complex64


@contextmanager
def config_context(config_action):
    """Creates a context in which the config action is applied and unapplies the configuration after execution.

    Args:
        config_action (ConfigAction): the configuration action to use
    """
    config_action.apply()
    try:
        yield
    finally:
        config_action.unapply()


class ConfigAction:

    def __init__(self):
        """Defines a configuration action for use in a configuration context.

        This should define an apply and unapply function that sets and unsets the configuration options.

        The applying action needs to remember the state before the application of the action.
        """

    def apply(self):
        """Apply the current action to the current runtime configuration."""

    def unapply(self):
        """Reset the current configuration to the previous state."""


class SimpleConfigAction(ConfigAction):

    def __init__(self):
        """Defines a default implementation of a configuration action.

        This simple config implements a default ``apply()`` method that saves the current state and a default
        ``unapply()`` that restores the previous state. Subclasses only need to implement ``_apply()``.
        """
        super().__init__()

    def apply(self):
        """Apply the current action to the current runtime configuration."""
        token = _config.set(dict(_config.get()))
        _applied_tokens.set(_applied_tokens.get() + (token,))
        self._apply()

    def unapply(self):
        """Reset the current configuration to the previous state."""
        tokens = _applied_tokens.get()
        _applied_tokens.set(tokens[:-1])
        _config.reset(tokens[-1])

    def _apply(self):
        """Implement this function add apply() logic after this class saves the current config."""


class RuntimeConfigurationAction(SimpleConfigAction):

    def __init__(self, double_precision=None):
        """Updates the runtime settings.

        Args:
            double_precision (boolean): if we evaluate Python numbers in double precision or not
        """
        super().__init__()
        self._double_precision = double_precision

    def _apply(self):
        if self._double_precision is not None:
            set_use_double_precision(self._double_precision)


class VoidConfigurationAction(ConfigAction):

    def __init__(self):
        """Does nothing, useful as a default config action.
        """
        super().__init__()


def _update_config(**settings):
    config = dict(_config.get())
    config.update(settings)
    _config.set(config)
