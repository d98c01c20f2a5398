"""Dense multi-dimensional arrays and strided views over them."""

from __future__ import annotations

import copy
from typing import Any, List, Sequence, Tuple, Union

Index = Union[int, Tuple[int, ...]]


class TensorView:
    """A strided view into shared storage; element writes reach the owner."""

    def __init__(self, shape: Sequence[int], strides: Sequence[int], data: List[Any], offset: int = 0) -> None:
        self.shape: Tuple[int, ...] = tuple(shape)
        self.strides: Tuple[int, ...] = tuple(strides)
        self._data = data
        self._offset = offset

    @property
    def ndim(self) -> int:
        return len(self.shape)

    def _flat(self, idx: Tuple[int, ...]) -> int:
        if len(idx) != self.ndim:
            raise IndexError(f"expected {self.ndim} indices, got {len(idx)}")
        pos = self._offset
        for i, size, stride in zip(idx, self.shape, self.strides):
            if not 0 <= i < size:
                raise IndexError(f"index {i} outside [0, {size})")
            pos += i * stride
        return pos

    def __getitem__(self, idx: Index):
        """Element for a full index tuple, or the sub-view along the first axis for an int."""
        if isinstance(idx, tuple):
            return self._data[self._flat(idx)]
        if self.ndim == 0:
            raise TypeError("a zero-dimensional view cannot be sliced")
        if not 0 <= idx < self.shape[0]:
            raise IndexError(f"index {idx} outside [0, {self.shape[0]})")
        return TensorView(self.shape[1:], self.strides[1:], self._data, self._offset + self.strides[0] * idx)

    def __setitem__(self, idx: Tuple[int, ...], value: Any) -> None:
        if not isinstance(idx, tuple):
            raise TypeError("assignment needs a full index tuple")
        self._data[self._flat(idx)] = value

    def at(self, idx: Index):
        """Bounds-checked indexing, the same as ``self[idx]``."""
        return self[idx]

    def item(self):
        """The single element of a zero-dimensional view."""
        if self.ndim != 0:
            raise TypeError("item() needs a zero-dimensional view")
        return self._data[self._offset]


class Tensor:
    """An owning row-major array with a fixed shape."""

    def __init__(self, shape: Sequence[int], fill: Any = None) -> None:
        self.shape: Tuple[int, ...] = tuple(shape)
        if any(s < 0 for s in self.shape):
            raise ValueError("shape entries must be non-negative")
        strides = [0] * len(self.shape)
        length = 1
        for i in range(len(self.shape) - 1, -1, -1):
            strides[i] = length
            length *= self.shape[i]
        self.strides: Tuple[int, ...] = tuple(strides)
        self._data: List[Any] = [fill] * length

    def __copy__(self) -> "Tensor":
        other = Tensor.__new__(Tensor)
        other.shape = self.shape
        other.strides = self.strides
        other._data = list(self._data)
        return other

    def __deepcopy__(self, memo) -> "Tensor":
        other = self.__copy__()
        other._data = copy.deepcopy(self._data, memo)
        return other

    def __len__(self) -> int:
        return self.shape[0] if self.shape else 1

    def view(self) -> TensorView:
        """A view over the whole tensor."""
        return TensorView(self.shape, self.strides, self._data)

    def __getitem__(self, idx: Index):
        return self.view()[idx]

    def __setitem__(self, idx: Tuple[int, ...], value: Any) -> None:
        self.view()[idx] = value

    def at(self, idx: Index):
        """Bounds-checked indexing, the same as ``self[idx]``."""
        return self.view().at(idx)

    def item(self):
        """The single element of a zero-dimensional tensor."""
        return self.view().item()