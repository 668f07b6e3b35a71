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

"""Replays union-find operations from scripts and prints the answers.

Scripts hold one operation per line:

    make_set A
    union A B
    find A
    connected A B
    size A

Blank lines and '#' comments are skipped and elements may be quoted. Every
script given on the command line runs against the same structure; with no
script, or '-', stdin is read.
"""

from absl import app
from absl import flags
from absl import logging
from typing import Iterable, Iterator, Optional, Sequence
from unigo.disjoint_set import DisjointSet, DisjointSetError
from unigo import util


FLAGS = flags.FLAGS


flags.DEFINE_string("output_file", "-", "Output filename ('-' means stdout)")
flags.DEFINE_bool(
    "keep_going",
    False,
    "Whether to report failed operations in the output and continue, rather "
    "than stop at the first one.",
)
flags.DEFINE_string(
    "log_level",
    "INFO",
    "The threshold for what messages will be logged. One of DEBUG, INFO, WARN, "
    "ERROR, or FATAL.",
)


# operation name => (number of elements, unbound DisjointSet method)
_OPERATIONS = {
    "make_set": (1, DisjointSet.make_set),
    "find": (1, DisjointSet.find),
    "union": (2, DisjointSet.union),
    "connected": (2, DisjointSet.connected),
    "size": (1, DisjointSet.set_size),
}


def _format(value) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def execute(dj: DisjointSet[str], tokens: Sequence[str]) -> Optional[str]:
    """Apply one tokenized operation; returns the line to print, if any."""
    op, *args = tokens
    if op not in _OPERATIONS:
        raise ValueError(
            f"Unknown operation {op!r}, expected one of {sorted(_OPERATIONS)}"
        )
    arity, method = _OPERATIONS[op]
    if len(args) != arity:
        raise ValueError(f"{op} takes {arity} element(s), got {len(args)}")
    return _format(method(dj, *args))


def replay(
    dj: DisjointSet[str],
    lines: Iterable[str],
    source: str = "<script>",
    keep_going: bool = False,
) -> Iterator[str]:
    for line_num, line in enumerate(lines, start=1):
        try:
            tokens = util.shell_split(line)
            if not tokens:
                continue
            result = execute(dj, tokens)
        except DisjointSetError as e:
            if not keep_going:
                raise
            logging.warning("%s:%d: %s", source, line_num, e)
            result = f"error: {e}"
        except ValueError as e:
            raise ValueError(f"{source}:{line_num}: {e}") from e
        if result is not None:
            yield result


def _run(argv):
    logging.set_verbosity(FLAGS.log_level)

    scripts = argv[1:] or ["-"]
    dj = DisjointSet()
    with util.file_printer(FLAGS.output_file) as print:
        for script in scripts:
            logging.debug("Replaying %s", script)
            with util.open_input(script) as f:
                results = replay(dj, f, source=script, keep_going=FLAGS.keep_going)
                for result in results:
                    print(result)
    logging.debug("%d elements tracked", len(dj))


def main():
    # We don't seem to be __main__ when run as cli tool installed by setuptools
    app.run(_run)


if __name__ == "__main__":
    app.run(_run)
