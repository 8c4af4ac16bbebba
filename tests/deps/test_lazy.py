from assemblerr.internals.module.lazy import LazyImport


def test_dir():
    import assemblerr.internals.immutable

    lazy = LazyImport('x', {}, 'assemblerr.internals.immutable')
    assert dir(assemblerr.internals.immutable) == dir(lazy)


def test_getattr():
    from assemblerr.internals.immutable import Immutable

    lazy = LazyImport('x', {}, 'assemblerr.internals.immutable')
    assert getattr(lazy, 'Immutable') is Immutable


def test_load_into_parent():
    import os

    parent = {}
    loader = LazyImport('path', parent, 'os', attr='path')
    assert loader.join('a', 'b') == os.path.join('a', 'b')
    assert parent['path'] is os.path


def test_deps():
    from assemblerr.deps import networkx, sympy

    assert sympy.Symbol('x').name == 'x'
    assert networkx.DiGraph().number_of_nodes() == 0
