"""Configuration parser"""

from .base import ConfigDoesntExistException, ConfigAlreadyExistsException
from .settings import ResfindConfig
