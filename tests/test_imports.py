import importlib
import pytest

@pytest.mark.parametrize("module", [
    "cmeans",
    "cmeans.algorithms",
    "cmeans.assignments",
    "cmeans.base",
    "cmeans.updates",
    "cmeans.distances",
    "cmeans.initialization",
    "cmeans.utils",
])
def test_submodules_exist(module):
    mod = importlib.import_module(module)
    assert mod is not None


def test_top_level_entry_points():
    import cmeans

    assert callable(cmeans.run_hard_iteration)
    assert callable(cmeans.run_fuzzy_iteration)
    assert cmeans.__version__
