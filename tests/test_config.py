import pytest

import assemblerr.config as config
from assemblerr.config import ConfigurationContext
from assemblerr.errors import AssemblerrWarning
from assemblerr.model.external.nonmem import conf


class ExampleConfiguration(config.Configuration):
    module = 'assemblerr.example'
    title = config.ConfigItem('default', 'A title')
    digits = config.ConfigItem(3, 'A number')
    verbose = config.ConfigItem(False, 'A flag')


@pytest.fixture
def config_dir(tmp_path, monkeypatch):
    monkeypatch.setenv('ASSEMBLERRCONFIGPATH', str(tmp_path))
    monkeypatch.delenv('ASSEMBLERRNOCONFIGFILE', raising=False)
    return tmp_path


def test_config_item():
    obj = ExampleConfiguration.__new__(ExampleConfiguration)
    assert obj.digits == 3
    obj.digits = 91
    assert obj.digits == 91
    obj.digits = '12'
    assert obj.digits == 12
    with pytest.raises(TypeError):
        obj.digits = 'A'


@pytest.mark.parametrize(
    'value, expected',
    (('True', True), ('yes', True), ('1', True), ('false', False), ('no', False)),
)
def test_config_item_bool(value, expected):
    obj = ExampleConfiguration.__new__(ExampleConfiguration)
    obj.verbose = value
    assert obj.verbose is expected


def test_missing_config_dir(config_dir):
    with pytest.raises(ValueError):
        config.config_path()


def test_read_section(config_dir):
    (config_dir / 'assemblerr.conf').write_text(
        '[assemblerr.example]\ntitle = PK model\ndigits = 6\nverbose = yes\n'
    )
    assert config.config_path() == config_dir / 'assemblerr.conf'
    assert config.read_section('assemblerr.example')['digits'] == '6'
    assert config.read_section('assemblerr.other') == {}

    example = ExampleConfiguration()
    assert (example.title, example.digits, example.verbose) == ('PK model', 6, True)


def test_config_file_disabled(config_dir, monkeypatch):
    (config_dir / 'assemblerr.conf').write_text('[assemblerr.example]\ndigits = 6\n')
    monkeypatch.setenv('ASSEMBLERRNOCONFIGFILE', '1')
    assert config.read_section('assemblerr.example') == {}
    assert ExampleConfiguration().digits == 3


def test_unknown_option(config_dir):
    (config_dir / 'assemblerr.conf').write_text('[assemblerr.example]\ndigts = 6\n')
    with pytest.warns(AssemblerrWarning, match='digts'):
        example = ExampleConfiguration()
    assert example.digits == 3


def test_context():
    old = conf.subroutine
    with ConfigurationContext(conf, subroutine='ADVAN13', tolerance='6'):
        assert conf.subroutine == 'ADVAN13'
        assert conf.tolerance == 6
    assert conf.subroutine == old
