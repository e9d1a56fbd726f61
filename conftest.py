"""Global configuration for pytest"""

import numpy as np
import pytest


@pytest.fixture(autouse=True, scope="session")
def numerical_exceptions():
    """
    Ensure any numerical errors raise an error in our test suite.
    The point is that we enforce such cases to be handled explicitly in our code.
    """
    np.seterr(all="raise")

