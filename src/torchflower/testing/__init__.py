"""Test utilities for torchflower applications.

::

    from torchflower.testing import TestClient
"""

from torchflower.testing.client import TestClient

__all__ = ["TestClient"]
