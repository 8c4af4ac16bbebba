import pytest


# Doctests get the globals of the module they are in. Remove everything that
# comes after __builtins__ so that a doctest missing an import fails.
def pytest_runtest_setup(item):
    found = False
    kept = dict()
    for key, value in item.dtest.globs.items():
        if key == '__builtins__':
            found = True
        elif found:
            continue
        kept[key] = value
    item.dtest.globs = kept


@pytest.fixture(autouse=True)
def nonmem_defaults():
    """Doctests must not depend on a configuration file"""
    from assemblerr.config import ConfigurationContext
    from assemblerr.model.external.nonmem import conf

    with ConfigurationContext(
        conf,
        problem_title='assemblerr model',
        data_file='data.csv',
        subroutine='ADVAN6',
        tolerance=9,
    ):
        yield
