#
#  xcsdk | xcsdk
#  log.py
#
#  Leveled logger shared by the SDK classification layer
#
#  This file is part of xcsdk. xcsdk is free software that
#  is made available under the MIT license. Consult the
#  file "LICENSE" that is distributed together with this file
#  for the exact licensing terms.
#
#  Copyright (c) 0cyn 2022.
#

from enum import Enum
import sys
import inspect
import os


class LogLevel(Enum):
    NONE = -1
    ERROR = 0
    WARN = 1
    INFO = 2
    DEBUG = 3
    DEBUG_MORE = 4


def print_err(msg):
    print(msg, file=sys.stderr)


class log:
    """
    Minimal leveled logger.

    Sinks are plain callables so the orchestrator (or a test) can redirect output.
    """

    LOG_LEVEL = LogLevel.ERROR
    # Should be a function name, without ()
    LOG_FUNC = print
    LOG_ERR = print_err

    @staticmethod
    def get_class_from_frame(fr):
        fr: inspect.FrameInfo = fr
        if 'self' in fr.frame.f_locals:
            return type(fr.frame.f_locals["self"]).__name__
        elif 'cls' in fr.frame.f_locals:
            return fr.frame.f_locals['cls'].__name__

        return None

    @staticmethod
    def line():
        stack_frame = inspect.stack()[3]
        filename = os.path.basename(stack_frame[1]).split('.')[0]
        line_name = f'L#{stack_frame[2]}'
        cn = log.get_class_from_frame(stack_frame)
        call_from = cn + ':' if cn is not None else ""
        call_from += stack_frame[3]
        return 'xcsdk.' + filename + ":" + line_name + ":" + call_from + '()'

    @staticmethod
    def _emit(level: LogLevel, prefix: str, msg, sink):
        if log.LOG_LEVEL.value >= level.value:
            sink(f'{prefix} - {log.line()} - {msg}')

    @staticmethod
    def debug(msg=""):
        log._emit(LogLevel.DEBUG, 'DEBUG', msg, log.LOG_FUNC)

    @staticmethod
    def debug_more(msg: str = ""):
        log._emit(LogLevel.DEBUG_MORE, 'DEBUG-2', msg, log.LOG_FUNC)

    @staticmethod
    def info(msg: str = ""):
        log._emit(LogLevel.INFO, 'INFO', msg, log.LOG_FUNC)

    @staticmethod
    def warn(msg: str = ""):
        log._emit(LogLevel.WARN, 'WARN', msg, log.LOG_ERR)

    @staticmethod
    def warning(msg: str = ""):
        log._emit(LogLevel.WARN, 'WARN', msg, log.LOG_ERR)

    @staticmethod
    def error(msg: str = ""):
        log._emit(LogLevel.ERROR, 'ERROR', msg, log.LOG_ERR)
