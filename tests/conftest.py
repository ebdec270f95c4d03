"""Pytest configuration and shared fixtures."""

import pytest

from lld_app.composite import File, Folder
from lld_app.config.defaults import AtmParams, MenuParams, PaymentParams


@pytest.fixture
def atm_params() -> AtmParams:
    """Small, easy to reason about note inventory."""
    return AtmParams(notes={2000: 2, 500: 3, 200: 5, 100: 10})


@pytest.fixture
def menu_params() -> MenuParams:
    """Default menu prices."""
    return MenuParams()


@pytest.fixture
def payment_params() -> PaymentParams:
    """Payment parameters with no delay between retries."""
    return PaymentParams(max_retries=2, retry_delay_seconds=0.0)


@pytest.fixture
def sample_tree() -> Folder:
    """
    root/
        file1.txt (10)
        docs/
            resume.pdf (20)
            drafts/
                draft1.txt (5)
        images/
            photo.jpg (40)
    """
    root = Folder("root")
    root.add(File("file1.txt", 10))

    docs = root.add(Folder("docs"))
    docs.add(File("resume.pdf", 20))
    drafts = docs.add(Folder("drafts"))
    drafts.add(File("draft1.txt", 5))

    images = root.add(Folder("images"))
    images.add(File("photo.jpg", 40))
    return root
