# ================================
# file: tests/conftest.py
# ================================
import os
import pytest

from interp import RoboMLInterpreter
from sim import SceneLayout

DATA_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "data")


@pytest.fixture
def interp():
    return RoboMLInterpreter(layout=SceneLayout())


@pytest.fixture
def data_dir():
    return DATA_DIR
