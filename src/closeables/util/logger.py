#
# Copyright (c) 2025, The closeables authors
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

__all__ = ("get_logger",)

import logging

from closeables.util.envs import (
    LOGGER_LEVEL,
    get_option,
)

LOGGER_NAME = "closeables"

DEFAULT_FORMAT = "%(asctime)s %(name)s:%(levelname)s: %(message)s"
DEBUG_FORMAT = "%(asctime)s %(name)s:%(levelname)s:%(threadName)s/%(funcName)s: %(message)s"

# "none" is handled separately, as it's not a level the `logging` module knows about.
_valid_levels = ("none", "debug", "info", "warning", "error", "critical")


def get_logger() -> logging.Logger:
    """Use in modules to get the root closeables logger"""

    logger = logging.getLogger(LOGGER_NAME)

    if hasattr(logger, "__closeables"):
        return logger

    # Someone else attached handlers to our logger name before us. Ours take precedence.
    logger.handlers.clear()

    level = get_option(LOGGER_LEVEL, _valid_levels, "info")
    if level == "none":
        logger.disabled = True
    else:
        log_format = DEBUG_FORMAT if level == "debug" else DEFAULT_FORMAT

        stream_handler = logging.StreamHandler()
        stream_handler.setFormatter(logging.Formatter(log_format))
        logger.addHandler(stream_handler)
        logger.setLevel(level.upper())

    logger.__closeables = True  # type: ignore

    return logger
