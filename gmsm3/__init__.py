from .calculation import rls_32, mod_adds_32
from .commons import HashAlgorithm
from .padding import sm3_pad, PaddingException
from .sm3 import *
