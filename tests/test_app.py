import pytest

import app as app_module
from config import (
    Config, DevelopmentConfig, ProductionConfig, TestingConfig, get_config, normalize_database_url
)


ALLOWED_ORIGIN = 'http://localhost:3000'


def test_health_check(client):
    resp = client.get('/api/health')

    assert resp.status_code == 200
    assert resp.get_json() == {
        'success': True,
        'message': 'API is running',
        'data': {'status': 'healthy'},
    }


def test_health_check_ignores_storage_state(client, drop_table):
    for table in ('project_tech', 'projects', 'skills', 'profile'):
        drop_table(table)

    assert client.get('/api/health').status_code == 200


def test_unknown_route_is_plain_text_404(client):
    resp = client.get('/api/nope')

    assert resp.status_code == 404
    assert resp.get_data(as_text=True) == '404 page not found\n'


def test_wrong_method_is_405(client):
    assert client.post('/api/profile').status_code == 405
    assert client.get('/api/contact').status_code == 405


def test_preflight_from_allowed_origin(client):
    resp = client.options('/api/contact', headers={
        'Origin': ALLOWED_ORIGIN,
        'Access-Control-Request-Method': 'POST',
        'Access-Control-Request-Headers': 'Content-Type',
    })

    assert resp.headers['Access-Control-Allow-Origin'] == ALLOWED_ORIGIN
    assert resp.headers['Access-Control-Allow-Credentials'] == 'true'
    methods = {m.strip() for m in resp.headers['Access-Control-Allow-Methods'].split(',')}
    assert methods == {'GET', 'POST', 'PUT', 'DELETE', 'OPTIONS'}
    assert 'content-type' in resp.headers['Access-Control-Allow-Headers'].lower()


def test_preflight_from_unknown_origin(client):
    resp = client.options('/api/contact', headers={
        'Origin': 'http://evil.example.com',
        'Access-Control-Request-Method': 'POST',
    })

    assert 'Access-Control-Allow-Origin' not in resp.headers


def test_simple_request_echoes_allowed_origin(client):
    resp = client.get('/api/health', headers={'Origin': 'http://www.propcloud.fun'})

    assert resp.headers['Access-Control-Allow-Origin'] == 'http://www.propcloud.fun'
    assert resp.headers['Access-Control-Allow-Credentials'] == 'true'


@pytest.mark.parametrize('url, expected', [
    ('mysql://u:p@db:3306/portfolio', 'mysql+pymysql://u:p@db:3306/portfolio'),
    ('postgres://u:p@db/portfolio', 'postgresql://u:p@db/portfolio'),
    ('sqlite:///portfolio.db', 'sqlite:///portfolio.db'),
    (None, None),
])
def test_normalize_database_url(url, expected):
    assert normalize_database_url(url) == expected


def test_get_config():
    assert get_config('testing') is TestingConfig
    assert get_config('unknown') is DevelopmentConfig


def test_main_exits_without_database_url(monkeypatch):
    class NoDatabaseConfig(Config):
        SQLALCHEMY_DATABASE_URI = None

    monkeypatch.setattr(app_module, 'get_config', lambda config_name=None: NoDatabaseConfig)

    with pytest.raises(SystemExit) as exc:
        app_module.main()
    assert exc.value.code == 1


def test_main_exits_when_database_unreachable(monkeypatch, tmp_path):
    class UnreachableConfig(Config):
        SQLALCHEMY_DATABASE_URI = f"sqlite:///{tmp_path / 'missing' / 'portfolio.db'}"

    monkeypatch.setattr(app_module, 'get_config', lambda config_name=None: UnreachableConfig)

    with pytest.raises(SystemExit) as exc:
        app_module.main()
    assert exc.value.code == 1


def test_main_defaults_to_production(monkeypatch):
    requested = []

    class NoDatabaseConfig(ProductionConfig):
        SQLALCHEMY_DATABASE_URI = None

    def fake_get_config(config_name=None):
        requested.append(config_name)
        return NoDatabaseConfig

    monkeypatch.delenv('FLASK_ENV', raising=False)
    monkeypatch.setattr(app_module, 'get_config', fake_get_config)

    with pytest.raises(SystemExit):
        app_module.main()
    assert requested == ['production']
    assert ProductionConfig.DEBUG is False
