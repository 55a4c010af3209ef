# =============================================================================
# tests/test_repositories.py - Repository Tests
# =============================================================================
# Both repository implementations are run through the same contract:
# save assigns or keeps ids, lookups of unknown ids return None and
# deletes are idempotent.
# =============================================================================

from employee_api.app.core.db import get_connection, init_db
from employee_api.app.models.employee import Employee


class TestSave:
    """Tests for save()."""

    def test_save_assigns_id(self, repository):
        saved = repository.save(Employee(name="Alice", department="HR", salary=60000))

        assert saved.id is not None
        assert saved.name == "Alice"
        assert saved.department == "HR"
        assert saved.salary == 60000

    def test_save_assigns_distinct_ids(self, repository):
        first = repository.save(Employee(name="Alice", department="HR", salary=60000))
        second = repository.save(Employee(name="Alice", department="HR", salary=60000))

        assert first.id != second.id

    def test_save_with_id_overwrites(self, repository):
        saved = repository.save(Employee(name="Alice", department="HR", salary=60000))

        repository.save(Employee(id=saved.id, name="Dana", department="Finance", salary=70000))

        assert repository.find_by_id(saved.id) == Employee(
            id=saved.id, name="Dana", department="Finance", salary=70000
        )
        assert len(repository.find_all()) == 1

    def test_save_with_unknown_id_inserts(self, repository):
        repository.save(Employee(id=42, name="Eve", department="Legal", salary=1))

        assert repository.find_by_id(42).name == "Eve"
        assert repository.save(Employee(name="Frank")).id > 42

    def test_save_keeps_missing_fields_empty(self, repository):
        saved = repository.save(Employee())

        stored = repository.find_by_id(saved.id)
        assert stored.name is None
        assert stored.department is None
        assert stored.salary == 0


class TestFind:
    """Tests for find_all() and find_by_id()."""

    def test_find_all_empty(self, repository):
        assert repository.find_all() == []

    def test_find_all_returns_every_record(self, repository):
        names = ["Alice", "Bob", "Charlie"]
        saved = [repository.save(Employee(name=name)) for name in names]

        records = repository.find_all()

        assert len(records) == 3
        assert [record.name for record in records] == names
        assert [record.id for record in records] == [employee.id for employee in saved]

    def test_find_by_unknown_id_returns_none(self, repository):
        assert repository.find_by_id(999) is None


class TestDelete:
    """Tests for delete_by_id()."""

    def test_delete_removes_record(self, repository):
        saved = repository.save(Employee(name="Bob", department="Engineering", salary=75000))

        repository.delete_by_id(saved.id)

        assert repository.find_by_id(saved.id) is None
        assert repository.find_all() == []

    def test_delete_unknown_id_is_noop(self, repository):
        repository.save(Employee(name="Alice"))

        repository.delete_by_id(999)
        repository.delete_by_id(999)

        assert len(repository.find_all()) == 1

    def test_ids_are_not_reused_after_delete(self, repository):
        first = repository.save(Employee(name="Alice"))
        second = repository.save(Employee(name="Bob"))
        repository.delete_by_id(second.id)

        third = repository.save(Employee(name="Charlie"))

        assert third.id not in {first.id, second.id}


class TestInMemoryIsolation:
    """Stored records are copies of what callers hold."""

    def test_mutating_returned_record_does_not_change_store(self, memory_repository):
        saved = memory_repository.save(Employee(name="Alice", department="HR", salary=60000))

        saved.name = "Mallory"

        assert memory_repository.find_by_id(saved.id).name == "Alice"


class TestMigrations:
    """Tests for init_db()."""

    def test_init_db_is_repeatable(self, database_path):
        init_db(database_path)

        conn = get_connection(database_path)
        try:
            versions = [row["version"] for row in conn.execute("SELECT version FROM migrations")]
            columns = [row["name"] for row in conn.execute("PRAGMA table_info(employees)")]
        finally:
            conn.close()

        assert versions == [1]
        assert columns == ["id", "name", "department", "salary"]
