r"""Certain features of trigm can be configured globally through RC settings.

RC settings can be manipulated either through the ``trigm.rc`` object,
or through RC configuration files.

The ``trigm.rc`` object
=======================

The ``trigm.rc`` object gives programmatic access to
globally configured features of trigm.

Configuration files
===================

``trigm.rc`` is initialized with configuration settings read
from the following files with precedence to those listed first:

1. ``trigmrc`` in the current directory. This is intended to allow for project
   specific settings without hard coding them in the calling script.

2. An operating system specific file in the user's home directory.

   * Windows: ``%userprofile%\.trigm\trigmrc``

   * Other (OS X, Linux): ``~/.config/trigm/trigmrc``

3. ``INSTALL/trigm-data/trigmrc`` (where ``INSTALL`` is the
   installation directory of the trigm package).

The RC file is divided into sections by lines containing the section name
in brackets, i.e. ``[section]``. A setting is set by giving the name followed
by a ``:`` or ``=`` and the value. All lines starting with ``#`` or ``;`` are
comments.

For example, to always use the real Schur factorization when no mode is
passed explicitly, add the following to a configuration file:

.. code-block:: ini

   [trigm]
   schur = real
"""

import logging
from configparser import DEFAULTSECT, ConfigParser

import trigm.utils.paths
from trigm.exceptions import ConfigError

logger = logging.getLogger(__name__)

# The default trigm RC settings. Access with
#   trigm.RC_DEFAULTS[section_name][option_name]
RC_DEFAULTS = {
    "trigm": {"schur": "none"},
    "onenorm": {"exact": "auto", "exact_max_order": 200, "t": 2, "itmax": 5},
}

# The RC files in the order in which they will be read.
RC_FILES = [
    trigm.utils.paths.trigmrc["system"],
    trigm.utils.paths.trigmrc["user"],
    trigm.utils.paths.trigmrc["project"],
]


class _RC(ConfigParser):  # pylint: disable=too-many-ancestors
    """Allows reading from and writing to trigm RC settings.

    This object is a :class:`configparser.ConfigParser`, which means that
    values can be accessed and manipulated like a dictionary::

       trigm.rc["onenorm"]["exact"] = "false"

    All values are stored as strings. If you want to store or retrieve a
    specific datatype, you should coerce it appropriately (e.g., with ``int()``).

    In addition to the normal :class:`configparser.ConfigParser` methods,
    this object also has a ``reload_rc`` method to reset ``trigm.rc``
    to default settings::

       trigm.rc.reload_rc()  # Reads defaults from configuration files
       trigm.rc.reload_rc(filenames=[])  # Ignores configuration files
    """

    def __init__(self):
        super().__init__()
        self.reload_rc()

    def exact_onenorm(self, order):
        """Whether 1-norms of powers of an ``order`` matrix are computed exactly."""
        exact = self.get("onenorm", "exact").strip().lower()
        if exact == "auto":
            return order < self._getint("onenorm", "exact_max_order")
        try:
            return self.getboolean("onenorm", "exact")
        except ValueError as e:
            raise ConfigError(
                f"onenorm.exact must be 'auto' or a boolean (got {exact!r})"
            ) from e

    def onenormest_options(self):
        """Keyword arguments for ``scipy.sparse.linalg.onenormest``."""
        return {
            "t": self._getint("onenorm", "t"),
            "itmax": self._getint("onenorm", "itmax"),
        }

    def _getint(self, section, option):
        try:
            return self.getint(section, option)
        except ValueError as e:
            raise ConfigError(
                f"{section}.{option} must be an integer "
                f"(got {self.get(section, option)!r})"
            ) from e

    def _clear(self):
        self.remove_section(DEFAULTSECT)
        for s in self.sections():
            self.remove_section(s)

    def _init_defaults(self):
        for section, settings in RC_DEFAULTS.items():
            self.add_section(section)
            for k, v in settings.items():
                self.set(section, k, str(v))

    def read_file(self, f, source=None):
        if source is None:
            source = f.name if hasattr(f, "name") else "<???>"

        logger.debug("Reading configuration from %s", source)
        return super().read_file(f, source)

    def read(self, filenames, encoding=None):
        logger.debug("Reading configuration files %s", filenames)
        return super().read(filenames, encoding=encoding)

    def reload_rc(self, filenames=None):
        """Resets the currently loaded RC settings and loads new RC files.

        Parameters
        ----------
        filenames: iterable object
            Filenames of RC files to load.
        """
        if filenames is None:
            filenames = RC_FILES

        self._clear()
        self._init_defaults()
        self.read(filenames)


rc = _RC()
