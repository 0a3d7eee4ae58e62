# log_utils.py -- Logging utilities for gitconf
# Copyright (C) 2026 The gitconf authors
#
# SPDX-License-Identifier: Apache-2.0 OR GPL-2.0-or-later
# gitconf is dual-licensed under the Apache License, Version 2.0 and the GNU
# General Public License as published by the Free Software Foundation; version 2.0
# or (at your option) any later version. You can redistribute it and/or
# modify it under the terms of either of these two licenses.
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
# You should have received a copy of the licenses; if not, see
# <http://www.gnu.org/licenses/> for a copy of the GNU General Public License
# and <http://www.apache.org/licenses/LICENSE-2.0> for a copy of the Apache
# License, Version 2.0.
#

"""Logging utilities for gitconf.

gitconf is a library, so by default nothing is printed: the ``gitconf``
logger carries a handler that drops every record. Applications that want
to see the parser's debug output call default_logging_config(), or set
GITCONF_TRACE in the environment before doing so.
"""

__all__ = [
    "default_logging_config",
    "getLogger",
    "remove_null_handler",
]

import logging
import os
import sys

getLogger = logging.getLogger

TRACE_ENVIRONMENT_VARIABLE = "GITCONF_TRACE"


class _NullHandler(logging.Handler):
    """No-op logging handler to avoid unexpected logging warnings."""

    def emit(self, record: logging.LogRecord) -> None:
        pass


_NULL_HANDLER = _NullHandler()
_GITCONF_LOGGER = getLogger("gitconf")
_GITCONF_LOGGER.addHandler(_NULL_HANDLER)


def _should_trace() -> bool:
    """Check if GITCONF_TRACE is enabled."""
    return _get_trace_target() is not None


def _get_trace_target() -> str | int | None:
    """Get the trace target from the GITCONF_TRACE environment variable.

    Returns:
        - None if tracing is disabled
        - 2 for stderr output (values "1", "2", "true")
        - int (3-9) for file descriptor
        - str for file path (absolute paths or directories)
    """
    trace_value = os.environ.get(TRACE_ENVIRONMENT_VARIABLE, "")

    if not trace_value or trace_value.lower() in ("0", "false"):
        return None

    if trace_value.lower() in ("1", "2", "true"):
        return 2

    try:
        fd = int(trace_value)
    except ValueError:
        pass
    else:
        if 3 <= fd <= 9:
            return fd
        return None

    if os.path.isabs(trace_value):
        return trace_value

    return None


def _configure_logging_from_trace() -> bool:
    """Configure logging based on GITCONF_TRACE.

    Returns True if trace configuration was successful, False otherwise.
    """
    trace_target = _get_trace_target()
    if trace_target is None:
        return False

    trace_format = "%(asctime)s %(name)s %(levelname)s: %(message)s"

    if trace_target == 2:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr, format=trace_format)
        return True

    if isinstance(trace_target, int):
        try:
            stream = os.fdopen(trace_target, "w", buffering=1)
        except OSError as e:
            sys.stderr.write(
                f"Warning: Failed to open {TRACE_ENVIRONMENT_VARIABLE} fd {trace_target}: {e}\n"
            )
            return False
        logging.basicConfig(level=logging.DEBUG, stream=stream, format=trace_format)
        return True

    if os.path.isdir(trace_target):
        # one file per process
        filename = os.path.join(trace_target, f"trace.{os.getpid()}")
    else:
        filename = trace_target
    try:
        logging.basicConfig(
            level=logging.DEBUG, filename=filename, filemode="a", format=trace_format
        )
    except OSError as e:
        sys.stderr.write(
            f"Warning: Failed to open {TRACE_ENVIRONMENT_VARIABLE} file {trace_target}: {e}\n"
        )
        return False
    return True


def default_logging_config() -> None:
    """Set up the default gitconf loggers.

    Honours GITCONF_TRACE the same way git honours GIT_TRACE; without it,
    INFO and above go to stderr.
    """
    remove_null_handler()

    if not _configure_logging_from_trace():
        logging.basicConfig(
            level=logging.INFO,
            stream=sys.stderr,
            format="%(asctime)s %(levelname)s: %(message)s",
        )


def remove_null_handler() -> None:
    """Remove the null handler from the gitconf logger.

    Callers setting up logging some other way can call this first so that
    records are not routed through the no-op handler.
    """
    _GITCONF_LOGGER.removeHandler(_NULL_HANDLER)
