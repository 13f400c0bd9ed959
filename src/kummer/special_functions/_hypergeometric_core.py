from __future__ import annotations

from typing import Callable

import torch
from torch import Tensor


def _elementwise_1_f_1(
    func: Callable[..., float],
    a: Tensor,
    b: Tensor,
    z: Tensor,
    *,
    tol: float,
) -> Tensor:
    """
    Apply a scalar M(a, b, z) kernel over broadcast tensors.

    Parameters
    ----------
    func : callable
        Scalar kernel called as ``func(a, b, z, tol=tol)``.
    a, b, z : Tensor
        Real parameter and argument tensors. Broadcasting is supported.
    tol : float
        Relative tolerance forwarded to the kernel.

    Returns
    -------
    Tensor
        float64 tensor of the broadcast shape on the device of ``z``.
    """
    if not (isinstance(a, Tensor) and isinstance(b, Tensor) and isinstance(z, Tensor)):
        raise TypeError("a, b, z must be torch.Tensors")
    if any(t.is_complex() for t in (a, b, z)):
        raise TypeError("a, b, z must be real-valued")

    batch_shape = torch.broadcast_shapes(a.shape, b.shape, z.shape)
    device = z.device

    # Kernels run in float64 on the host
    a_b = a.to(dtype=torch.float64, device="cpu").expand(batch_shape).reshape(-1)
    b_b = b.to(dtype=torch.float64, device="cpu").expand(batch_shape).reshape(-1)
    z_b = z.to(dtype=torch.float64, device="cpu").expand(batch_shape).reshape(-1)

    values = [
        func(a_i, b_i, z_i, tol=tol)
        for a_i, b_i, z_i in zip(a_b.tolist(), b_b.tolist(), z_b.tolist())
    ]
    out = torch.tensor(values, dtype=torch.float64).reshape(batch_shape)
    return out.to(device)


__all__ = ["_elementwise_1_f_1"]
