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

# https://en.wikipedia.org/wiki/Disjoint-set_data_structure

from absl import logging
from typing import Generic, Hashable, List, MutableMapping, Optional, TypeVar

T = TypeVar("T", bound=Hashable)


class DisjointSetError(Exception):
    pass


class AlreadyExistsError(DisjointSetError, ValueError):
    def __init__(self, item):
        super().__init__(f"set {item!r} already exists")
        self.item = item


class NotFoundError(DisjointSetError, LookupError):
    def __init__(self, item):
        super().__init__(f"value {item!r} does not exist in any set")
        self.item = item


class AlreadyInitializedError(DisjointSetError, RuntimeError):
    pass


class DisjointSet(Generic[T]):
    """Union-find over hashable elements.

    Path compression on find, union by size on merge. Storage is allocated on
    the first call to make_set, find, union, connected or set_size.

    Not thread safe: find rewrites parent pointers while it reads them, so a
    structure shared between threads needs every call guarded by one lock.
    """

    parent: Optional[MutableMapping[T, T]]
    size: Optional[MutableMapping[T, int]]

    def __init__(self):
        self.parent = None
        self.size = None

    @property
    def initialized(self) -> bool:
        return self.parent is not None and self.size is not None

    def _initialize_storage(self):
        if self.initialized:
            raise AlreadyInitializedError("storage is already initialized")
        logging.debug("Allocating disjoint set storage")
        self.parent = {}
        self.size = {}

    def _ensure_storage(self):
        if not self.initialized:
            self._initialize_storage()

    def _require(self, *items: T):
        # Raise for the first unknown item before anything is mutated
        for item in items:
            if item not in self.parent:
                raise NotFoundError(item)

    def __len__(self) -> int:
        if not self.initialized:
            return 0
        return len(self.parent)

    def __contains__(self, item) -> bool:
        return self.initialized and item in self.parent

    def make_set(self, e: T):
        self._ensure_storage()
        if e in self.parent:
            raise AlreadyExistsError(e)
        self.parent[e] = e
        self.size[e] = 1

    # find with full path compression
    def find(self, e: T) -> T:
        self._ensure_storage()
        self._require(e)

        path: List[T] = []
        root = e
        while self.parent[root] != root:
            path.append(root)
            root = self.parent[root]

        for node in path:
            self.parent[node] = root
        return root

    # union by size; on a tie x's root survives
    def union(self, x: T, y: T) -> T:
        """Merge the sets holding x and y, returning the surviving root."""
        self._ensure_storage()
        self._require(x, y)

        x_root = self.find(x)
        y_root = self.find(y)
        if x_root == y_root:
            return x_root  # already in the same set
        if self.size[x_root] < self.size[y_root]:
            x_root, y_root = y_root, x_root

        self.parent[y_root] = x_root
        self.size[x_root] += self.size.pop(y_root)
        return x_root

    def connected(self, x: T, y: T) -> bool:
        self._ensure_storage()
        self._require(x, y)
        return self.find(x) == self.find(y)

    def set_size(self, e: T) -> int:
        """Number of elements in the set holding e."""
        return self.size[self.find(e)]
