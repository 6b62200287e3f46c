"""
Tests for Assessment Repository and storage adapters.
"""

import json

import pytest

from riskmatrix.errors import MalformedDataError, NotFoundError
from riskmatrix.models.assessment_models import Assessment
from riskmatrix.persistence.repository import AssessmentRepository
from riskmatrix.persistence.storage import InMemoryStorage, JsonFileStorage, StoragePort


def test_per_matter_save_and_load(repository, memory_storage, sample_assessment):
    repository.save(sample_assessment)
    assert memory_storage.get("assessment_Acme v. Widgets") is not None
    assert repository.load("Acme v. Widgets") == sample_assessment


def test_load_missing_raises_not_found(repository):
    with pytest.raises(NotFoundError) as exc_info:
        repository.load("Nobody")
    assert exc_info.value.matter_name == "Nobody"


def test_save_overwrites_same_name(repository, sample_assessment):
    repository.save(sample_assessment)
    replacement = Assessment(matter_name=sample_assessment.matter_name)
    repository.save(replacement)
    assert repository.load(sample_assessment.matter_name) == replacement
    assert repository.list_matters() == [sample_assessment.matter_name]


def test_corrupt_record_raises_malformed(repository, memory_storage):
    memory_storage.set("assessment_Broken", "{not json")
    with pytest.raises(MalformedDataError):
        repository.load("Broken")


def test_list_and_delete(repository, memory_storage, sample_assessment):
    memory_storage.set("unrelated", "x")
    repository.save(sample_assessment)
    repository.save(Assessment(matter_name="Second"))
    assert sorted(repository.list_matters()) == ["Acme v. Widgets", "Second"]

    assert repository.delete("Second") is True
    assert repository.delete("Second") is False
    assert repository.list_matters() == ["Acme v. Widgets"]
    assert memory_storage.get("unrelated") == "x"


def test_global_list_layout(memory_storage, sample_assessment):
    repo = AssessmentRepository(memory_storage, layout="global_list")
    repo.save(sample_assessment)
    repo.save(Assessment(matter_name="Second"))
    repo.save(Assessment(matter_name=sample_assessment.matter_name))

    stored = json.loads(memory_storage.get("savedAssessments"))
    assert [r["matterName"] for r in stored] == ["Second", "Acme v. Widgets"]
    assert repo.load("Acme v. Widgets").likelihood_factors == ()
    assert repo.list_matters() == ["Second", "Acme v. Widgets"]

    assert repo.delete("Second") is True
    assert repo.list_matters() == ["Acme v. Widgets"]


def test_global_list_missing_and_corrupt(memory_storage):
    repo = AssessmentRepository(memory_storage, layout="global_list")
    with pytest.raises(NotFoundError):
        repo.load("Nope")

    memory_storage.set("savedAssessments", '{"matterName": "not a list"}')
    with pytest.raises(MalformedDataError):
        repo.load("Nope")


def test_global_list_accepts_legacy_records(memory_storage, legacy_record):
    memory_storage.set("savedAssessments", json.dumps([legacy_record]))
    repo = AssessmentRepository(memory_storage, layout="global_list")
    assert repo.load("Legacy Matter").severity_factors[0].rating == 5


def test_adapters_satisfy_storage_port(tmp_path):
    assert isinstance(InMemoryStorage(), StoragePort)
    assert isinstance(JsonFileStorage(tmp_path / "store.json"), StoragePort)


def test_json_file_storage_persists_across_instances(tmp_path, sample_assessment):
    path = tmp_path / "nested" / "store.json"
    AssessmentRepository(JsonFileStorage(path), layout="per_matter").save(sample_assessment)

    reopened = AssessmentRepository(JsonFileStorage(path), layout="per_matter")
    assert reopened.load(sample_assessment.matter_name) == sample_assessment


def test_json_file_storage_remove_and_keys(tmp_path):
    storage = JsonFileStorage(tmp_path / "store.json")
    assert storage.keys() == []
    assert storage.get("a") is None
    storage.set("a", "1")
    storage.set("b", "2")
    storage.remove("a")
    storage.remove("missing")
    assert storage.keys() == ["b"]


def test_json_file_storage_corrupt_file(tmp_path):
    path = tmp_path / "store.json"
    path.write_text("not json", encoding="utf-8")
    with pytest.raises(MalformedDataError):
        JsonFileStorage(path).get("a")


def test_json_file_storage_invalid_utf8(tmp_path):
    path = tmp_path / "store.json"
    path.write_bytes(b'{"a": "\xff\xfe"}')
    with pytest.raises(MalformedDataError):
        JsonFileStorage(path).get("a")
