import os
import sys

if sys.platform.startswith("win"):  # pragma: no cover
    config_dir = os.path.expanduser(os.path.join("~", ".trigm"))
else:
    config_dir = os.path.expanduser(os.path.join("~", ".config", "trigm"))

install_dir = os.path.abspath(
    os.path.join(os.path.dirname(__file__), os.pardir, os.pardir)
)


def find_data_dir(install_dir, prefix=sys.prefix):
    """Directory holding the system ``trigmrc``.

    A source checkout or an editable install keeps ``trigm-data`` next to the
    package; a regular install puts the ``data_files`` under ``prefix``.
    """
    local = os.path.join(install_dir, "trigm-data")
    if os.path.isdir(local):
        return local
    return os.path.join(prefix, "trigm-data")


data_dir = find_data_dir(install_dir)

trigmrc = {
    "system": os.path.join(data_dir, "trigmrc"),
    "user": os.path.join(config_dir, "trigmrc"),
    "project": os.path.abspath(os.path.join(os.curdir, "trigmrc")),
}
