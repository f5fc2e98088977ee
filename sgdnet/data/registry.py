"""Dataset registry and metadata contracts."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, List, MutableMapping

from ..core.types import Example


@dataclass(frozen=True)
class DatasetSpec:
    """In-memory dataset ready to be fed to a network.

    Attributes
    ----------
    name:
        Registry identifier.
    train:
        Examples used for SGD.
    eval:
        Held-out examples classified after every epoch. May be empty.
    d_in, d_out:
        Input and target widths, i.e. the first and last layer of a matching
        network structure.
    provenance:
        Free-form metadata recorded in the run manifest.
    """

    name: str
    train: List[Example]
    eval: List[Example]
    d_in: int
    d_out: int
    provenance: Dict[str, Any] = field(default_factory=dict)

    @property
    def splits(self) -> Dict[str, int]:
        return {"train": len(self.train), "eval": len(self.eval)}


DatasetFactory = Callable[..., DatasetSpec]

_REGISTRY: MutableMapping[str, DatasetFactory] = {}


def register_dataset(
    name: str | None = None,
    factory: DatasetFactory | None = None,
) -> Callable[[DatasetFactory], DatasetFactory] | DatasetFactory:
    """Register a dataset factory, either directly or as a decorator."""

    def _decorator(func: DatasetFactory) -> DatasetFactory:
        _REGISTRY[str(name or func.__name__)] = func
        return func

    if factory is not None:
        return _decorator(factory)
    if name is None:
        raise TypeError("register_dataset requires a name when used without a decorator")
    return _decorator


def get_dataset(name: str, /, **options: Any) -> DatasetSpec:
    """Build the dataset registered as ``name`` with ``options``."""

    if name not in _REGISTRY:
        available = ", ".join(available_datasets())
        raise KeyError(f"Unknown dataset {name!r}. Available datasets: {available}")
    spec = _REGISTRY[name](**options)
    _validate_spec(spec)
    return spec


def available_datasets() -> Iterable[str]:
    return sorted(_REGISTRY)


def _validate_spec(spec: DatasetSpec) -> None:
    if not spec.train:
        raise ValueError(f"Dataset {spec.name!r} has no training examples")
    for split, examples in (("train", spec.train), ("eval", spec.eval)):
        for idx, example in enumerate(examples):
            if example.input.size != spec.d_in or example.target.size != spec.d_out:
                raise ValueError(
                    f"{split} example {idx} has shape "
                    f"({example.input.size}, {example.target.size}), "
                    f"expected ({spec.d_in}, {spec.d_out})"
                )


__all__ = ["DatasetSpec", "register_dataset", "get_dataset", "available_datasets"]
