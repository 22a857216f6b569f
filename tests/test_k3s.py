import pytest

from tcmodules.core import ContainerError, ContainerPort, Mount, MountKind, WaitFor
from tcmodules.k3s import (
    KUBE_SECURE_PORT,
    RANCHER_WEBHOOK_PORT,
    TRAEFIK_HTTP,
    K3s,
    K3sCmd,
)


def test_image_name_and_tag():
    image = K3s()
    assert image.name == "rancher/k3s"
    assert image.tag == "v1.28.8-k3s1"


def test_ports():
    assert K3s().expose_ports() == [KUBE_SECURE_PORT, RANCHER_WEBHOOK_PORT, TRAEFIK_HTTP]
    assert KUBE_SECURE_PORT == ContainerPort.tcp(6443)


def test_default_cmd():
    assert K3s().cmd() == ["server", "--snapshotter=native"]


def test_custom_snapshotter():
    command = K3sCmd().with_snapshotter("overlayfs")
    assert list(command)[0] == "server"
    assert list(command)[1].endswith("=overlayfs")
    assert K3sCmd().snapshotter == "native"


def test_ready_condition():
    assert K3s().ready_conditions() == [
        WaitFor.message_on_stderr("Node controller sync successful")
    ]


def test_no_mount_by_default():
    image = K3s()
    assert image.mounts() == []
    assert image.env_vars() == {}


def test_conf_mount_sets_mount_and_env(tmp_path):
    image = K3s().with_conf_mount(tmp_path)
    assert image.mounts() == [Mount(MountKind.BIND, str(tmp_path), "/etc/rancher/k3s/")]
    assert image.env_vars() == {"K3S_KUBECONFIG_MODE": "644"}


def test_with_conf_mount_keeps_original(tmp_path):
    original = K3s()
    original.with_conf_mount(tmp_path)
    assert original.conf_mount is None


def test_read_kube_config_round_trip(tmp_path):
    content = "apiVersion: v1\nclusters: []\n"
    (tmp_path / "k3s.yaml").write_text(content)
    assert K3s().with_conf_mount(tmp_path).read_kube_config() == content


def test_read_kube_config_without_mount():
    with pytest.raises(ContainerError):
        K3s().read_kube_config()


def test_read_kube_config_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        K3s().with_conf_mount(tmp_path).read_kube_config()


def test_request_options(tmp_path):
    request = (
        K3s().with_conf_mount(tmp_path).with_privileged(True).with_userns_mode("host")
    )
    assert request.privileged is True
    assert request.userns_mode == "host"
    assert request.env_vars() == {"K3S_KUBECONFIG_MODE": "644"}