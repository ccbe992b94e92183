# -*- coding: utf-8 -*- #
# Copyright 2024 Google LLC. All Rights Reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Console and file logging for gapis.

Log records go to stderr at the configured verbosity and, once AddFileLogging
is called, to a per-run file at every level. Output meant for the user goes
through the out and status writers, which can be silenced with the
core/user_output_enabled property and are copied into the log file.
"""

import datetime
import logging
import os
import sys
import time

from gapis.core import properties
from gapis.core.util import files

DEFAULT_VERBOSITY = logging.WARNING

_VERBOSITY_LEVELS = [
    ('debug', logging.DEBUG),
    ('info', logging.INFO),
    ('warning', logging.WARNING),
    ('error', logging.ERROR),
    ('critical', logging.CRITICAL),
    ('none', logging.CRITICAL + 10),
]
VALID_VERBOSITY_STRINGS = dict(_VERBOSITY_LEVELS)

# Log files live in logs_dir/<day>/<time>.log, e.g.
# logs/2024.05.01/12.00.00.000000.log.
DAY_DIR_FORMAT = '%Y.%m.%d'
FILENAME_FORMAT = '%H.%M.%S.%f'
LOG_FILE_EXTENSION = '.log'

_FILE_LOG_FORMAT = '%(asctime)s %(levelname)-8s %(name)-15s %(message)s'
_FILE_ONLY_LOGGER_NAME = '___FILE_ONLY___'


class _ConsoleWriter(object):
  """A minimal file-like object for user output.

  Everything written is logged at INFO level to the log files. It reaches the
  console only while user output is enabled.
  """

  def __init__(self, manager, stream_name):
    self._manager = manager
    self._stream_name = stream_name

  @property
  def stream(self):
    return getattr(self._manager, self._stream_name)

  def Print(self, *msg):
    """Writes the space separated messages followed by a newline."""
    self.write(' '.join(str(x) for x in msg) + '\n')

  # pylint: disable=invalid-name, These must match file-like objects.
  def write(self, msg):
    self._manager.file_only_logger.info(msg)
    if self._manager.user_output_enabled:
      self.stream.write(msg)

  def flush(self):
    if self._manager.user_output_enabled:
      self.stream.flush()

  def isatty(self):
    isatty = getattr(self.stream, 'isatty', None)
    return bool(isatty and isatty())


class _ConsoleFormatter(logging.Formatter):
  """Prefixes console records with their level, in color on a terminal."""

  _COLORS = {
      logging.WARNING: '\033[1;33m',
      logging.ERROR: '\033[1;31m',
      logging.CRITICAL: '\033[1;31m',
  }
  _END = '\033[0m'

  def __init__(self, stream):
    super(_ConsoleFormatter, self).__init__('%(levelname)s: %(message)s')
    isatty = getattr(stream, 'isatty', None)
    self._use_color = (bool(isatty and isatty()) and
                       sys.platform != 'win32' and
                       not properties.VALUES.core.disable_color.GetBool())

  def format(self, record):
    message = super(_ConsoleFormatter, self).format(record)
    color = self._COLORS.get(record.levelno) if self._use_color else None
    if not color:
      return message
    prefix_end = len(record.levelname) + 1
    return color + message[:prefix_end] + self._END + message[prefix_end:]


class _LogManager(object):
  """Owns the handlers of the root logger and of the file-only logger."""

  def __init__(self):
    self._root_logger = logging.getLogger()
    self._root_logger.setLevel(logging.NOTSET)
    # User output is copied to the log files through this logger. It does not
    # propagate so the console does not show it twice.
    self.file_only_logger = logging.getLogger(_FILE_ONLY_LOGGER_NAME)
    self.file_only_logger.setLevel(logging.NOTSET)
    self.file_only_logger.propagate = False

    self.stdout = None
    self.stderr = None
    self.stderr_handler = None
    self.verbosity = None
    self.user_output_enabled = None
    self.current_log_file = None
    self._logs_dirs = []
    self._file_handlers = []
    self.Reset(sys.stdout, sys.stderr)

  def Reset(self, stdout, stderr):
    """Drops every handler and starts over with a stderr handler."""
    for handler in self._file_handlers:
      handler.close()
    self._file_handlers = []
    self._logs_dirs = []
    self.current_log_file = None

    self.stdout = stdout
    self.stderr = stderr
    self.stderr_handler = logging.StreamHandler(stderr)
    self.stderr_handler.setFormatter(_ConsoleFormatter(stderr))
    self._root_logger.handlers[:] = [self.stderr_handler]
    self.file_only_logger.handlers[:] = [logging.NullHandler()]

    self.verbosity = None
    self.SetVerbosity(None)
    self.SetUserOutputEnabled(None)

  def SetVerbosity(self, verbosity):
    """Sets the console level, from core/verbosity when verbosity is None."""
    if verbosity is None:
      name = properties.VALUES.core.verbosity.Get(validate=False)
      verbosity = VALID_VERBOSITY_STRINGS.get((name or '').lower(),
                                              DEFAULT_VERBOSITY)
    old_verbosity = self.verbosity
    self.verbosity = verbosity
    self.stderr_handler.setLevel(verbosity)
    return old_verbosity

  def SetUserOutputEnabled(self, enabled):
    """Turns user output on or off, from properties when enabled is None."""
    if enabled is None:
      enabled = properties.VALUES.core.user_output_enabled.GetBool()
    old_enabled = self.user_output_enabled
    self.user_output_enabled = True if enabled is None else enabled
    return old_enabled

  def AddLogsDir(self, logs_dir):
    """Starts logging every record to a new file under logs_dir."""
    if not logs_dir or logs_dir in self._logs_dirs:
      return
    self._logs_dirs.append(logs_dir)

    max_days = properties.VALUES.core.max_log_days.GetInt()
    if max_days:
      _RemoveExpiredLogs(logs_dir, max_days)

    now = datetime.datetime.now()
    day_dir = os.path.join(logs_dir, now.strftime(DAY_DIR_FORMAT))
    log_file = os.path.join(
        day_dir, now.strftime(FILENAME_FORMAT) + LOG_FILE_EXTENSION)
    try:
      files.MakeDir(day_dir)
      handler = logging.FileHandler(log_file, encoding='utf-8')
    except (OSError, files.Error) as e:
      warning('Could not set up log file in [%s]: %s', logs_dir, e)
      return

    handler.setLevel(logging.NOTSET)
    handler.setFormatter(logging.Formatter(_FILE_LOG_FORMAT))
    self._file_handlers.append(handler)
    self._root_logger.addHandler(handler)
    self.file_only_logger.addHandler(handler)
    self.current_log_file = log_file


def _RemoveExpiredLogs(logs_dir, max_days):
  """Deletes day directories of logs_dir older than max_days.

  Only .log files older than max_days are removed; a day directory that still
  holds anything else is kept.

  Args:
    logs_dir: str, The logs directory.
    max_days: int, How long log files are kept.
  """
  try:
    day_dirs = os.listdir(logs_dir)
  except OSError:
    return
  now = datetime.datetime.now()
  oldest_mtime = time.time() - max_days * 24 * 60 * 60
  for day_dir in day_dirs:
    day_path = os.path.join(logs_dir, day_dir)
    try:
      day = datetime.datetime.strptime(day_dir, DAY_DIR_FORMAT)
    except ValueError:
      continue
    if not os.path.isdir(day_path) or now - day <= datetime.timedelta(
        days=max_days + 1):
      continue
    for name in os.listdir(day_path):
      path = os.path.join(day_path, name)
      if (name.endswith(LOG_FILE_EXTENSION) and
          os.path.getmtime(path) < oldest_mtime):
        os.remove(path)
    if not os.listdir(day_path):
      os.rmdir(day_path)


_log_manager = _LogManager()

# Writes to stdout while user output is enabled.
out = _ConsoleWriter(_log_manager, 'stdout')

# Writes to stderr while user output is enabled. Used for progress and
# other messages that are not a command's result.
err = _ConsoleWriter(_log_manager, 'stderr')
status = err

file_only_logger = _log_manager.file_only_logger


def Print(*msg):
  """Prints the messages to the out writer."""
  out.Print(*msg)


def Reset(stdout=None, stderr=None):
  """Reinitializes logging, mainly between tests.

  Args:
    stdout: file-like, The stream for user output. Defaults to sys.stdout.
    stderr: file-like, The stream for logs and status. Defaults to
      sys.stderr.
  """
  _log_manager.Reset(stdout or sys.stdout, stderr or sys.stderr)


def SetVerbosity(verbosity):
  """Sets the console verbosity and returns the previous one.

  Args:
    verbosity: int, A logging level. None uses core/verbosity or the default.

  Returns:
    int, The previous verbosity.
  """
  return _log_manager.SetVerbosity(verbosity)


def GetVerbosity():
  return _log_manager.verbosity


def GetVerbosityName(verbosity=None):
  """Returns the name of verbosity, or of the current one, or None."""
  if verbosity is None:
    verbosity = GetVerbosity()
  for name, level in _VERBOSITY_LEVELS:
    if level == verbosity:
      return name
  return None


def OrderedVerbosityNames():
  """Returns the verbosity names from most to least verbose."""
  return [name for name, _ in _VERBOSITY_LEVELS]


def SetUserOutputEnabled(enabled):
  """Turns user output on or off and returns the previous setting."""
  return _log_manager.SetUserOutputEnabled(enabled)


def IsUserOutputEnabled():
  return _log_manager.user_output_enabled


def AddFileLogging(logs_dir):
  """Logs every record to a new file under logs_dir.

  Day directories older than core/max_log_days are removed first.

  Args:
    logs_dir: str, The root directory of the log files.
  """
  _log_manager.AddLogsDir(logs_dir)


def GetLogFilePath():
  """Returns the active log file, or None when file logging is off."""
  return _log_manager.current_log_file


# pylint: disable=invalid-name
getLogger = logging.getLogger
log = logging.log
debug = logging.debug
info = logging.info
warning = logging.warning
error = logging.error
critical = logging.critical
fatal = logging.fatal
exception = logging.exception
