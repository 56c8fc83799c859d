import pytest

import kernelwire
from kernelwire.protocol.errors import ConfigurationError


connection_text = b'''{
    "shell_port": 53794,
    "iopub_port": 53795,
    "stdin_port": 53796,
    "control_port": 53797,
    "hb_port": 53798,
    "ip": "127.0.0.1",
    "key": "a0436f6c-1916-498b-8eb9-e81ab9368e84",
    "transport": "tcp",
    "signature_scheme": "hmac-sha256",
    "kernel_name": "gophernotes"
}'''


@pytest.fixture
def connection_file(tmp_path):
    path = tmp_path / 'kernel-1234.json'
    path.write_bytes(connection_text)
    return path


def test_load(connection_file):

    connection = kernelwire.config.load(str(connection_file))

    assert connection.key == b'a0436f6c-1916-498b-8eb9-e81ab9368e84'
    assert connection.signature_scheme == 'hmac-sha256'
    assert connection.address('shell') == 'tcp://127.0.0.1:53794'
    assert connection.address('hb') == 'tcp://127.0.0.1:53798'

    signer = connection.signer()
    assert signer.key == connection.key

    with pytest.raises(ValueError):
        connection.address('nonsense')


def test_environment(connection_file, monkeypatch):

    monkeypatch.setenv('KERNELWIRE_CONNECTION_FILE', str(connection_file))
    connection = kernelwire.config.load()
    assert connection.iopub_port == 53795

    monkeypatch.delenv('KERNELWIRE_CONNECTION_FILE')
    with pytest.raises(ConfigurationError):
        kernelwire.config.load()


def test_ipc_addresses():

    raw = dict()
    raw['transport'] = 'ipc'
    raw['ip'] = 'kernel-1234'
    raw['shell_port'] = 1
    raw['iopub_port'] = 2

    connection = kernelwire.config.parse(raw)

    assert connection.address('shell') == 'ipc://kernel-1234-1'
    assert connection.address('iopub') == 'ipc://kernel-1234-2'


def test_defaults():

    connection = kernelwire.config.parse(dict())

    assert connection.key == b''
    assert connection.signature_scheme == 'hmac-sha256'
    assert connection.signer().enabled == False


def test_bad_files(tmp_path):

    with pytest.raises(ConfigurationError):
        kernelwire.config.load(str(tmp_path / 'missing.json'))

    garbage = tmp_path / 'garbage.json'
    garbage.write_bytes(b'{"key": ')
    with pytest.raises(ConfigurationError):
        kernelwire.config.load(str(garbage))

    bad_values = list()
    bad_values.append([])
    bad_values.append({'key': 5})
    bad_values.append({'signature_scheme': 'hmac-md7'})
    bad_values.append({'signature_scheme': None})
    bad_values.append({'shell_port': 'fifty'})
    bad_values.append({'transport': 'udp'})

    for raw in bad_values:
        with pytest.raises(ConfigurationError):
            kernelwire.config.parse(raw)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
