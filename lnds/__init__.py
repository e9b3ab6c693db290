from datetime import datetime
from importlib.metadata import version, PackageNotFoundError


__author__ = ("Haibao Tang",)
__copyright__ = "Copyright (c) 2010-{}, Haibao Tang".format(datetime.now().year)
__email__ = "tanghaibao@gmail.com"
__license__ = "BSD"
__status__ = "Development"

try:
    __version__ = version("lnds")
except PackageNotFoundError:
    # package is not installed
    __version__ = "0.0.0"
