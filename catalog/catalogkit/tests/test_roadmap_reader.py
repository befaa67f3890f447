from pathlib import Path
import pytest
from catalog.catalogkit.core.constants import Kind, State
from catalog.catalogkit.core.model import Item, Registry
from catalog.catalogkit.core.roadmap_reader import RoadmapError, apply_roadmap_states, read_roadmap_states

@pytest.fixture
def registry(tmp_path):
    reg = Registry(tmp_path)
    for name in ["foo", "bar", "baz", "qux"]:
        reg.roadmap(Kind.COMPONENT).add(Item(path=Path(f"{name}.json"), kind=Kind.COMPONENT, artifact_id=f"camel-{name}"))
    for kind in Kind:
        reg.roadmap(kind).outpath.write_text("", encoding="utf-8")
    return reg

def _seed(registry, text):
    roadmap = registry.roadmap(Kind.COMPONENT)
    roadmap.outpath.write_text(text, encoding="utf-8")
    return roadmap

def test_planned_and_rejected_sections_are_applied(registry):
    roadmap = _seed(registry, "[supported]\nbaz\n\n[planned]\nfoo\n\n[undecided]\nqux\n\n[rejected]\nbar (deprecated)\n\n")

    assert read_roadmap_states(roadmap) == 2
    assert roadmap.item("foo").state == State.PLANNED
    assert roadmap.item("bar").state == State.REJECTED
    # supported/undecided sections are not authoritative
    assert roadmap.item("baz").state == State.UNDECIDED
    assert roadmap.item("qux").state == State.UNDECIDED

def test_comments_blank_lines_and_unknown_names_ignored(registry):
    roadmap = _seed(registry, "# header comment\n[planned]\n\n# foo\nunknown\nfoo extra words\n")

    assert read_roadmap_states(roadmap) == 1
    assert roadmap.item("foo").state == State.PLANNED

def test_unrecognized_header_clears_section(registry):
    roadmap = _seed(registry, "[planned]\nfoo\n[something]\nbar\n[rejected]\nbaz\n")

    read_roadmap_states(roadmap)
    assert roadmap.item("foo").state == State.PLANNED
    assert roadmap.item("bar").state == State.UNDECIDED
    assert roadmap.item("baz").state == State.REJECTED

def test_entries_before_any_section_are_ignored(registry):
    roadmap = _seed(registry, "foo\n[rejected]\nbar\n")
    read_roadmap_states(roadmap)
    assert roadmap.item("foo").state == State.UNDECIDED
    assert roadmap.item("bar").state == State.REJECTED

def test_last_recognized_section_wins(registry):
    roadmap = _seed(registry, "[planned]\nfoo\n[rejected]\nfoo\n")
    read_roadmap_states(roadmap)
    assert roadmap.item("foo").state == State.REJECTED

def test_header_must_match_exactly(registry):
    roadmap = _seed(registry, " [planned]\nfoo\n[planned] \nbar\n")
    read_roadmap_states(roadmap)
    # Both lines start with something other than an exact header
    assert roadmap.item("foo").state == State.UNDECIDED
    assert roadmap.item("bar").state == State.UNDECIDED

def test_crlf_line_endings(registry):
    roadmap = _seed(registry, "[planned]\r\nfoo\r\n")
    read_roadmap_states(roadmap)
    assert roadmap.item("foo").state == State.PLANNED

def test_missing_roadmap_is_fatal(registry):
    roadmap = registry.roadmap(Kind.COMPONENT)
    roadmap.outpath.unlink()

    with pytest.raises(RoadmapError, match="component"):
        read_roadmap_states(roadmap)

def test_apply_roadmap_states_covers_all_kinds(registry):
    _seed(registry, "[rejected]\nfoo\nbar\n")
    assert apply_roadmap_states(registry) == 2

def test_apply_roadmap_states_aborts_when_any_kind_missing(registry):
    registry.roadmap(Kind.OTHER).outpath.unlink()
    with pytest.raises(RoadmapError):
        apply_roadmap_states(registry)
