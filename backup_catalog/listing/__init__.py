from .handler import *
from .render import *
