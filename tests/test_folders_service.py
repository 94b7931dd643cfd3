import json

import pytest

import config as app_config
from web.services import folders_service, vhosts_service


@pytest.fixture
def site(tmp_path, monkeypatch):
    """Builds an htdocs tree, config dir, vhosts file and hosts file."""
    htdocs = tmp_path / "htdocs"
    for name in ["known", "unknown"]:
        (htdocs / "sites" / name).mkdir(parents=True)

    config_dir = tmp_path / "config"
    config_dir.mkdir()
    (config_dir / "folders.json").write_text(
        json.dumps(
            [
                {"title": "All", "dir": "sites"},
                {"title": "Vhosts", "dir": "sites", "linkTemplate": "vhost", "requireVhost": True},
            ]
        ),
        encoding="utf-8",
    )
    (config_dir / "link_templates.json").write_text(
        json.dumps(
            [
                {"name": "basic", "html": '<li><a href="/{urlName}">{urlName}</a></li>'},
                {"name": "vhost", "html": '<li><a href="https://{urlName}.test">{urlName}</a></li>'},
            ]
        ),
        encoding="utf-8",
    )

    vhosts = tmp_path / "httpd-vhosts.conf"
    vhosts.write_text(
        "<VirtualHost *:443>\n  ServerName known.test\n</VirtualHost>\n"
        "<VirtualHost *:80>\n  ServerName unknown.test\n</VirtualHost>\n",
        encoding="utf-8",
    )
    hosts = tmp_path / "hosts"
    hosts.write_text("127.0.0.1 known.test\n", encoding="utf-8")

    monkeypatch.setattr(
        app_config,
        "_CONFIG",
        {
            "DEBUG_MODE": False,
            "APACHE_PATH": str(tmp_path),
            "VHOSTS_CONF_PATH": str(vhosts),
            "CRT_PATH": str(tmp_path / "crt"),
            "HOSTS_FILES": [str(hosts)],
            "HTDOCS_PATH": str(htdocs),
            "CONFIG_DIR": str(config_dir),
        },
    )
    return tmp_path


def test_get_folder_view(site):
    view = folders_service.get_folder_view()

    all_column, vhost_column = view.columns
    assert len(all_column.items) == 2
    assert vhost_column.items == ['<li><a href="https://known.test">known</a></li>']
    assert view.warnings == []


def test_vhost_status_and_filters(site):
    resolver = folders_service.new_request_resolver()

    assert vhosts_service.get_host_status(resolver) == {
        "known.test": True,
        "unknown.test": False,
    }
    assert list(vhosts_service.get_vhost_records(resolver, "missing-cert")) == ["known.test"]
    assert list(vhosts_service.get_vhost_records(resolver, "nonsense")) == [
        "known.test",
        "unknown.test",
    ]
    assert vhosts_service.is_apache_path_valid() is True


def test_each_request_gets_its_own_resolver(site):
    assert folders_service.new_request_resolver() is not folders_service.new_request_resolver()
