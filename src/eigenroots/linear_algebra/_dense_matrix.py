"""Dense matrix container used to assemble matrix pencils."""

from typing import Optional, Tuple, Union

import torch
from torch import Tensor


class DenseMatrix:
    """Resizable dense matrix backed by a 2D tensor.

    Parameters
    ----------
    rows : int
        Number of rows.
    cols : int
        Number of columns.
    dtype : torch.dtype
        Element type. Defaults to float64.
    device : torch.device, optional
        Device of the backing tensor.

    Examples
    --------
    >>> a = DenseMatrix(dtype=torch.float64)
    >>> a.resize(2, 2)
    >>> a[0, 1] = 1.0
    >>> identity = DenseMatrix().set_identity(2)
    """

    def __init__(
        self,
        rows: int = 0,
        cols: int = 0,
        *,
        dtype: torch.dtype = torch.float64,
        device: Optional[torch.device] = None,
    ):
        _check_size(rows, cols)
        self._data = torch.zeros(rows, cols, dtype=dtype, device=device)

    @classmethod
    def from_tensor(cls, tensor: Tensor) -> "DenseMatrix":
        """Wrap a copy of a 2D tensor."""
        if tensor.dim() != 2:
            raise ValueError(f"tensor must be 2D, got {tensor.dim()}D")

        matrix = cls(dtype=tensor.dtype, device=tensor.device)
        matrix._data = tensor.clone()
        return matrix

    @property
    def shape(self) -> Tuple[int, int]:
        return tuple(self._data.shape)

    @property
    def dtype(self) -> torch.dtype:
        return self._data.dtype

    @property
    def device(self) -> torch.device:
        return self._data.device

    @property
    def tensor(self) -> Tensor:
        """Backing tensor, shared with this matrix."""
        return self._data

    def resize(self, rows: int, cols: int) -> "DenseMatrix":
        """Resize to rows x cols. Previous contents are discarded."""
        _check_size(rows, cols)
        self._data = torch.zeros(
            rows, cols, dtype=self._data.dtype, device=self._data.device
        )
        return self

    def set_zero(self) -> "DenseMatrix":
        self._data.zero_()
        return self

    def set_identity(self, n: int) -> "DenseMatrix":
        """Resize to n x n and fill with the identity."""
        _check_size(n, n)
        self._data = torch.eye(n, dtype=self._data.dtype, device=self._data.device)
        return self

    def __getitem__(self, index: Tuple[int, int]) -> Tensor:
        i, j = index
        return self._data[i, j]

    def __setitem__(
        self, index: Tuple[int, int], value: Union[float, Tensor]
    ) -> None:
        i, j = index
        self._data[i, j] = value

    def __repr__(self) -> str:
        rows, cols = self.shape
        return f"DenseMatrix(rows={rows}, cols={cols}, dtype={self.dtype})"


def _check_size(rows: int, cols: int) -> None:
    if rows < 0 or cols < 0:
        raise ValueError(
            f"Matrix dimensions must be non-negative, got ({rows}, {cols})"
        )
