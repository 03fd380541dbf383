"""Tests for heartbeat creation from host state."""

from conftest import DATA_ROOT, PROJECT, FakeRunner, warnings_in

from scenebeat.core import UNSAVED_SCENE, BranchResolver, HeartbeatFactory
from scenebeat.host import StaticHostContext


def test_entity_is_absolute_scene_path(factory, host):
    heartbeat = factory.create(host)

    assert heartbeat.entity == "/p/Spaceship/Assets/Scenes/Main.unity"
    assert heartbeat.entity_type == "file"
    assert heartbeat.project == PROJECT
    assert heartbeat.language == "Unity"
    assert heartbeat.is_write is False


def test_trailing_slash_on_data_root(factory):
    heartbeat = factory.create(StaticHostContext(root=DATA_ROOT + "/", document_path="Assets/Level1.unity"))

    assert heartbeat.entity == "/p/Spaceship/Assets/Level1.unity"


def test_path_without_assets_prefix_is_joined_as_is(factory):
    heartbeat = factory.create(StaticHostContext(root=DATA_ROOT, document_path="Packages/Level1.unity"))

    assert heartbeat.entity == "/p/Spaceship/Assets/Packages/Level1.unity"


def test_unsaved_scene_sentinel(factory):
    """No active document produces the Unsaved Scene entity."""
    assert factory.create(StaticHostContext(root=DATA_ROOT)).entity == UNSAVED_SCENE
    assert factory.create(StaticHostContext(root=DATA_ROOT, document_path="")).entity == UNSAVED_SCENE


def test_branch_resolved_from_data_root(runner, factory, host):
    heartbeat = factory.create(host)

    assert heartbeat.branch == "main"
    assert runner.calls[0][2] == DATA_ROOT


def test_branch_failure_leaves_branch_absent(host, log_records):
    factory = HeartbeatFactory(PROJECT, BranchResolver(runner=FakeRunner(error=OSError("no git"))))

    heartbeat = factory.create(host)

    assert heartbeat.branch is None
    assert heartbeat.entity == "/p/Spaceship/Assets/Scenes/Main.unity"


class BrokenDocumentHost:
    def active_document_path(self):
        raise RuntimeError("scene not loaded")

    def data_root(self):
        return DATA_ROOT


class BrokenRootHost:
    def active_document_path(self):
        return "Assets/Main.unity"

    def data_root(self):
        raise RuntimeError("no project")


def test_unreadable_document_path_falls_back_to_sentinel(factory, log_records):
    heartbeat = factory.create(BrokenDocumentHost())

    assert heartbeat.entity == UNSAVED_SCENE
    assert heartbeat.branch == "main"
    assert len(warnings_in(log_records)) == 1


def test_unreadable_data_root_skips_branch_lookup(runner, factory, log_records):
    heartbeat = factory.create(BrokenRootHost())

    assert heartbeat.entity == UNSAVED_SCENE
    assert heartbeat.branch is None
    assert runner.calls == []


def test_create_does_not_share_state(factory, host):
    first = factory.create(host)
    second = factory.create(host)

    first.is_write = True

    assert first is not second
    assert second.is_write is False
