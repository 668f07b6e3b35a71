# Copyright 2026 Google LLC
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#      http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Small helper functions."""

import contextlib
from functools import partial
import shlex
import sys
from typing import Iterator, List, TextIO


@contextlib.contextmanager
def file_printer(filename):
    if filename == "-":  # conventionally means print to stdout
        yield print
    else:
        with open(filename, "w") as f:
            yield partial(print, file=f)


@contextlib.contextmanager
def open_input(filename) -> Iterator[TextIO]:
    if filename == "-":  # conventionally means read from stdin
        yield sys.stdin
    else:
        with open(filename) as f:
            yield f


def shell_split(s: str) -> List[str]:
    """Split a line into shell-style tokens, dropping '#' comments."""
    return shlex.split(s, comments=True, posix=True)
