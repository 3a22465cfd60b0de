"""
SoundCloud API Wrapper
~~~~~~~~~~~~~~~~~~~~~~

An unofficial asynchronous wrapper to interact with SoundCloud API

:copyright: (c) 2021 AkshuAgarwal
:license: MIT, see LICENSE for more details.
"""

from .client import *
from .errors import *
from .response import *
from .state import *

__title__ = "aiosoundcloud"
__author__ = "AkshuAgarwal"
__license__ = "MIT"
__copyright__ = "Copyright (c) 2021 AkshuAgarwal"
__version__ = "0.1.0"

import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())
