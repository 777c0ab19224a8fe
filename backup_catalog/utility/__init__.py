from .console import *
from .timestamp import *
from .wal import *
