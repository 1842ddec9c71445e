"""
Abstract base class for the geometric entities of pga_kernel.

Every entity is an immutable value wrapping a single coordinate tensor of
shape (..., N). The base class owns the storage, validation, comparison and
conversion helpers so that the concrete types only define their fields and
their algebra.

Class Hierarchy:
    GeometricEntity (abstract)
    ├── Point   (grade 1)
    ├── Line    (grade 2)
    └── Plane   (grade 3)
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import List, Sequence, Tuple, TypeVar

import torch

from .constants import DEFAULT_DTYPE, DEFAULT_RTOL, DEFAULT_ATOL
from .types import Scalar, Vector3


E = TypeVar('E', bound='GeometricEntity')


def as_component(value: Scalar) -> torch.Tensor:
    """Convert one coordinate to a tensor, keeping tensors as they are."""
    if isinstance(value, torch.Tensor):
        return value
    if isinstance(value, (int, float)):
        return torch.tensor(float(value), dtype=DEFAULT_DTYPE)
    raise TypeError(f"Expected a number or tensor component, got {type(value).__name__}")


def as_vector3(value: Vector3) -> torch.Tensor:
    """Convert a 3-vector (direction or moment) to a tensor of shape (..., 3)."""
    if isinstance(value, torch.Tensor):
        tensor = value
    else:
        tensor = torch.tensor([float(c) for c in value], dtype=DEFAULT_DTYPE)
    if tensor.dim() == 0 or tensor.shape[-1] != 3:
        raise ValueError(f"Expected 3 components, got shape {tuple(tensor.shape)}")
    return tensor


def _common_dtype(tensors: Sequence[torch.Tensor]) -> torch.dtype:
    dtype = tensors[0].dtype
    for t in tensors[1:]:
        dtype = torch.promote_types(dtype, t.dtype)
    if not dtype.is_floating_point:
        dtype = DEFAULT_DTYPE
    return dtype


def stack_components(*components: Scalar) -> torch.Tensor:
    """
    Stack scalar coordinates into a single (..., N) tensor.

    Numbers become float32; tensors are broadcast to a common shape and
    promoted to a common floating dtype.
    """
    tensors = [as_component(c) for c in components]
    dtype = _common_dtype(tensors)
    tensors = torch.broadcast_tensors(*[t.to(dtype) for t in tensors])
    return torch.stack(tensors, dim=-1)


def concat_vectors(*vectors: Vector3) -> torch.Tensor:
    """Concatenate 3-vectors into a single (..., 3 * len(vectors)) tensor."""
    tensors = [as_vector3(v) for v in vectors]
    dtype = _common_dtype(tensors)
    batch_shape = torch.broadcast_shapes(*[t.shape[:-1] for t in tensors])
    tensors = [t.to(dtype).expand(*batch_shape, 3) for t in tensors]
    return torch.cat(tensors, dim=-1)


class GeometricEntity(ABC):
    """
    Abstract base class for points, lines and planes.

    Subclasses must define:
        - NUM_COMPONENTS: size of the last coordinate dimension
        - FIELDS: canonical component names, in storage order
        - BLADES: basis blade names, in storage order
        - dual(): the weight dual of the entity

    Equality (==) is exact, component by component, and only between
    entities of the same type. Use isclose() for a tolerance.
    """

    NUM_COMPONENTS: int = 0
    FIELDS: Tuple[str, ...] = ()
    BLADES: Tuple[str, ...] = ()

    _coords: torch.Tensor

    @classmethod
    def from_tensor(cls, coords: torch.Tensor) -> 'GeometricEntity':
        """
        Wrap a raw coordinate tensor without copying it.

        Args:
            coords: Tensor of shape (..., NUM_COMPONENTS) in storage order

        Returns:
            Entity viewing the tensor
        """
        if not isinstance(coords, torch.Tensor):
            raise TypeError(f"Expected a tensor, got {type(coords).__name__}")
        if coords.dim() == 0 or coords.shape[-1] != cls.NUM_COMPONENTS:
            raise ValueError(
                f"Expected {cls.NUM_COMPONENTS} components, "
                f"got shape {tuple(coords.shape)}"
            )
        entity = cls.__new__(cls)
        entity._coords = coords
        return entity

    @property
    def coords(self) -> torch.Tensor:
        """Raw coordinate tensor of shape (..., NUM_COMPONENTS)."""
        return self._coords

    @property
    def shape(self) -> torch.Size:
        """Batch shape (excluding the components)."""
        return self._coords.shape[:-1]

    @property
    def dtype(self) -> torch.dtype:
        return self._coords.dtype

    @property
    def device(self) -> torch.device:
        return self._coords.device

    def to(self: E, device: torch.device) -> E:
        """Move to specified device."""
        return type(self).from_tensor(self._coords.to(device))

    def _component(self, index: int) -> torch.Tensor:
        return self._coords[..., index]

    def tolist(self) -> List:
        """Coordinates as nested Python lists."""
        return self._coords.tolist()

    # === Algebra shared by every grade ===

    @abstractmethod
    def dual(self) -> 'GeometricEntity':
        """Weight dual of the entity."""
        pass

    def __invert__(self) -> 'GeometricEntity':
        """Operator ~: weight dual."""
        return self.dual()

    def __neg__(self: E) -> E:
        """Negation of every component."""
        return type(self).from_tensor(-self._coords)

    # === Comparison ===

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        if self._coords.shape != other._coords.shape:
            return False
        return bool(torch.eq(self._coords, other._coords).all())

    __hash__ = None

    def isclose(
        self,
        other: 'GeometricEntity',
        rtol: float = DEFAULT_RTOL,
        atol: float = DEFAULT_ATOL,
    ) -> bool:
        """Approximate equality of every component."""
        if type(other) is not type(self):
            raise TypeError(
                f"Cannot compare {type(self).__name__} with {type(other).__name__}"
            )
        if self._coords.shape != other._coords.shape:
            return False
        return torch.allclose(self._coords, other._coords, rtol=rtol, atol=atol)

    def __repr__(self) -> str:
        name = type(self).__name__
        if self._coords.dim() == 1:
            fields = ", ".join(
                f"{field}={value:g}" for field, value in zip(self.FIELDS, self._coords.tolist())
            )
            return f"{name}({fields})"
        return f"{name}(shape={tuple(self.shape)}, dtype={self.dtype})"
