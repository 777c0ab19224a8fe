from .filesystem import *
from .folder import *
from .memory import *
