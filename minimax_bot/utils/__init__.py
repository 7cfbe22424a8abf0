"""
Utilities Module

Key Components:
    - setup_logger: File logging for drivers that own stdout
"""

from minimax_bot.utils.log import setup_logger, DEFAULT_LOG_FILE

__all__ = ['setup_logger', 'DEFAULT_LOG_FILE']
