import torch
from torch import Tensor


def cascade_filters(*sos: Tensor) -> Tensor:
    """Series connection: the sections of every filter, in order.

    The transfer function of the result is the product of the inputs'.

    Examples
    --------
    >>> first = torch.tensor([[1.0, 0.0, 0.0, 1.0, -0.5, 0.0]])
    >>> cascade_filters(first, first).shape
    torch.Size([2, 6])
    """
    return torch.cat(sos, dim=0)
