from __future__ import annotations

from sshhop.config import Settings
from sshhop.directory import ResolvedTarget
from sshhop.invocations import download_argv, mount_argv, ssh_argv, unmount_argv, upload_argv

TARGET = ResolvedTarget(host="10.0.0.5", port=2222, login="alice")


def test_ssh_argv() -> None:
    assert ssh_argv(TARGET) == ["ssh", "-l", "alice", "-p", "2222", "10.0.0.5"]


def test_scp_argv_download_and_upload() -> None:
    assert download_argv(TARGET, "/var/log/syslog") == [
        "scp", "-P", "2222", "alice@10.0.0.5:/var/log/syslog", "./",
    ]
    assert upload_argv(TARGET, "notes.txt") == [
        "scp", "-P", "2222", "notes.txt", "alice@10.0.0.5:",
    ]


def test_mount_argv_keeps_ssh_command_as_one_element() -> None:
    argv = mount_argv(TARGET, "/mnt/home")

    assert argv == [
        "sshfs", "-p", "2222", "-o", "ssh_command=ssh -l alice",
        "10.0.0.5:/home/alice", "/mnt/home",
    ]


def test_unmount_argv() -> None:
    assert unmount_argv("/mnt/home") == ["fusermount", "-u", "/mnt/home"]


def test_executables_come_from_settings() -> None:
    settings = Settings(ssh="/opt/bin/ssh", sshfs="sshfs3", fusermount="fusermount3")

    assert ssh_argv(TARGET, settings)[0] == "/opt/bin/ssh"
    assert mount_argv(TARGET, "m", settings)[0] == "sshfs3"
    assert "ssh_command=/opt/bin/ssh -l alice" in mount_argv(TARGET, "m", settings)
    assert unmount_argv("m", settings)[0] == "fusermount3"
