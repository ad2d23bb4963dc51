"""Byte counts paired with binary (IEC) units, rendered like `195.4 KiB`."""

from loguru import logger

from .amount import Amount
from .unit import Unit

logger.disable(__name__)

__all__ = ['Amount', 'Unit']
