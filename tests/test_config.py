import pytest

from covid_data.Config import CONFIG, load_config


def test_defaults_are_copied():
    config = load_config()
    config['region'] = 'Florida'

    assert CONFIG['region'] == 'New York'
    assert config['date_format'] == '%m/%d/%y'


def test_yaml_overrides(tmp_path):
    path = tmp_path / 'report.yaml'
    path.write_text("region: Georgia\nfigsize: [8, 4]\nshow_plots: true\n")

    config = load_config(str(path))

    assert config['region'] == 'Georgia'
    assert config['figsize'] == (8, 4)
    assert config['show_plots'] is True


def test_keyword_overrides_win(tmp_path):
    path = tmp_path / 'report.yaml'
    path.write_text("region: Georgia\n")

    assert load_config(str(path), region='Texas')['region'] == 'Texas'


def test_empty_yaml(tmp_path):
    path = tmp_path / 'empty.yaml'
    path.write_text("")

    assert load_config(str(path)) == CONFIG


def test_unknown_key(tmp_path):
    path = tmp_path / 'report.yaml'
    path.write_text("regoin: Georgia\n")

    with pytest.raises(KeyError):
        load_config(str(path))


def test_yaml_must_be_mapping(tmp_path):
    path = tmp_path / 'report.yaml'
    path.write_text("- New York\n- Georgia\n")

    with pytest.raises(ValueError):
        load_config(str(path))
