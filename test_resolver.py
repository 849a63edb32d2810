from taskboard.database import EntityStore
from taskboard.services.resolver import RelationshipResolver
from conftest import make_task


def test_task_assignee_matches_user(store):
    resolver = RelationshipResolver(store)
    for task in store.tasks:
        resolved = resolver.task(task)
        assert resolved["assignee"] == store.users.get_by_id(task.assignee_id).to_json()


def test_dangling_references_resolve_to_none():
    store = EntityStore().init({
        "tasks": [make_task("1", assigneeId="404", reporterId="405", projectId="406")],
    })
    resolved = RelationshipResolver(store).task(store.tasks.get_by_id("1"))

    assert resolved["assignee"] is None
    assert resolved["reporter"] is None
    assert resolved["project"] is None
    assert resolved["assigneeId"] == "404"


def test_task_without_project(store):
    store.reset({"users": [], "tasks": [make_task("1", projectId=None)]})
    resolved = RelationshipResolver(store).task(store.tasks.get_by_id("1"))
    assert resolved["project"] is None
    assert resolved["projectId"] is None


def test_list_references_drop_unknown_ids_and_keep_collection_order(store):
    task = store.tasks.get_by_id("1")
    task = task.model_copy(update={"watcher_ids": ["3", "missing", "2"]})
    resolved = RelationshipResolver(store).task(task)
    assert [w["id"] for w in resolved["watchers"]] == ["2", "3"]


def test_task_expansion(store):
    resolved = RelationshipResolver(store).task(store.tasks.get_by_id("1"))

    assert resolved["reporter"]["name"] == "Mike Johnson"
    assert resolved["project"]["name"] == "E-Commerce Platform"
    assert [c["id"] for c in resolved["comments"]] == ["1"]
    assert resolved["comments"][0]["author"]["name"] == "Mike Johnson"
    assert [e["hours"] for e in resolved["timeEntries"]] == [4, 4]
    assert resolved["timeEntries"][0]["user"]["id"] == "1"
    assert resolved["timeEntries"][0]["date"] == "2025-11-25"
    assert [w["id"] for w in resolved["watchers"]] == ["2", "3"]
    assert resolved["dueDate"] == "2025-12-05"


def test_nested_records_are_not_expanded(store):
    resolved = RelationshipResolver(store).task(store.tasks.get_by_id("1"))
    assert "department" not in resolved["assignee"]
    assert resolved["assignee"]["departmentId"] == "1"
    assert "owner" not in resolved["project"]


def test_missing_record_resolves_to_none(store):
    resolver = RelationshipResolver(store)
    assert resolver.task(None) is None
    assert resolver.project(store.projects.get_by_id("nope")) is None


def test_project_expansion(store):
    resolved = RelationshipResolver(store).project(store.projects.get_by_id("1"))

    assert resolved["owner"]["id"] == "2"
    assert resolved["department"]["name"] == "Engineering"
    assert [u["id"] for u in resolved["team"]] == ["1", "2", "3"]
    assert [t["id"] for t in resolved["tasks"]] == ["1", "2"]
    assert resolved["status"] == "ACTIVE"


def test_department_expansion(store):
    resolved = RelationshipResolver(store).department(store.departments.get_by_id("1"))

    assert resolved["manager"]["name"] == "Mike Johnson"
    assert [u["id"] for u in resolved["members"]] == ["1", "2", "4"]
    assert [p["id"] for p in resolved["projects"]] == ["1", "2"]


def test_user_expansion(store, clock):
    resolved = RelationshipResolver(store, clock).user(store.users.get_by_id("3"))

    assert resolved["department"]["name"] == "Quality Assurance"
    assert [p["id"] for p in resolved["projects"]] == ["1"]
    assert resolved["performance"]["tasksCompletedThisMonth"] == 0
    assert resolved["performance"]["qualityScore"] is None


def test_user_projects_include_owned(store):
    resolved = RelationshipResolver(store).user(store.users.get_by_id("1"))
    assert [p["id"] for p in resolved["projects"]] == ["1", "2"]


def test_user_with_dangling_department(store):
    user = store.users.get_by_id("4").model_copy(update={"department_id": "99"})
    assert RelationshipResolver(store).user(user)["department"] is None


def test_comment_and_time_entry_expansion(store):
    resolver = RelationshipResolver(store)

    comment = resolver.comment(store.comments.get_by_id("2"))
    assert comment["author"]["id"] == "1"
    assert comment["task"]["id"] == "2"

    entry = resolver.time_entry(store.time_entries.get_by_id("1"))
    assert entry["user"]["name"] == "Sarah Chen"
    assert entry["task"]["title"] == "Design new landing page"
