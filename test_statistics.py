from datetime import date, datetime

from taskboard.database import EntityStore
from taskboard.services.statistics import StatisticsAggregator
from conftest import FIXED_NOW, make_task


def aggregator(store, now=FIXED_NOW):
    return StatisticsAggregator(store, lambda: now)


def test_seed_statistics(store):
    stats = aggregator(store).task_statistics()

    assert stats.total == 2
    assert stats.in_progress == 1
    assert stats.completed == 1
    assert stats.backlog == stats.todo == stats.in_review == stats.blocked == stats.cancelled == 0
    assert stats.high_priority == 2
    assert stats.overdue == 0
    assert stats.completed_this_week == 1
    assert stats.completed_this_month == 1
    # 2025-11-15 09:00 -> 2025-11-26 17:00
    assert stats.average_completion_time == 272.0


def test_wire_names(store):
    data = aggregator(store).task_statistics().model_dump(by_alias=True)
    assert set(data) == {
        "total", "backlog", "todo", "inProgress", "inReview", "blocked", "completed",
        "cancelled", "highPriority", "overdue", "completedThisWeek", "completedThisMonth",
        "averageCompletionTime",
    }


def test_status_buckets_sum_to_total():
    statuses = ["BACKLOG", "TODO", "IN_PROGRESS", "IN_REVIEW", "BLOCKED", "COMPLETED", "CANCELLED", "TODO"]
    store = EntityStore().init({
        "tasks": [make_task(str(i), status=s) for i, s in enumerate(statuses, start=1)],
    })
    stats = aggregator(store).task_statistics()

    assert stats.todo == 2
    assert stats.backlog == stats.in_review == stats.blocked == stats.cancelled == 1
    assert stats.backlog + stats.todo + stats.in_progress + stats.in_review + stats.blocked + stats.completed + stats.cancelled == stats.total


def test_overdue_counts_past_due_unfinished_tasks(store):
    stats = aggregator(store, datetime(2025, 12, 10, 8, 0)).task_statistics()
    assert stats.overdue == 1


def test_cancelled_past_due_counts_as_overdue():
    store = EntityStore().init({"tasks": [make_task("1", status="CANCELLED", dueDate="2025-11-01")]})
    assert aggregator(store).task_statistics().overdue == 1


def test_high_priority_includes_high_and_highest():
    store = EntityStore().init({"tasks": [
        make_task("1", priority="HIGH"),
        make_task("2", priority="HIGHEST"),
        make_task("3", priority="MEDIUM"),
        make_task("4", priority="LOWEST"),
    ]})
    assert aggregator(store).task_statistics().high_priority == 2


def test_completion_windows():
    store = EntityStore().init({"tasks": [
        # this week
        make_task("1", status="COMPLETED", createdAt="2025-11-24T08:00:00", completedAt="2025-11-24T10:00:00"),
        # earlier this month
        make_task("2", status="COMPLETED", createdAt="2025-11-01T08:00:00", completedAt="2025-11-10T08:00:00"),
        # last month
        make_task("3", status="COMPLETED", createdAt="2025-10-01T08:00:00", completedAt="2025-10-30T08:00:00"),
        # completed without a timestamp
        make_task("4", status="COMPLETED"),
        # stale timestamp on a reopened task is ignored
        make_task("5", status="IN_PROGRESS", completedAt="2025-11-25T08:00:00"),
    ]})
    stats = aggregator(store).task_statistics()

    assert stats.completed == 4
    assert stats.completed_this_week == 1
    assert stats.completed_this_month == 2
    # (2 + 216 + 696) / 3
    assert stats.average_completion_time == 304.67


def test_average_completion_time_without_completions():
    store = EntityStore().init({"tasks": [make_task("1")]})
    assert aggregator(store).task_statistics().average_completion_time == 0.0


def test_empty_store():
    stats = aggregator(EntityStore().init({})).task_statistics()
    assert stats.total == 0
    assert stats.average_completion_time == 0.0


def test_scope_by_project_and_user(store):
    service = aggregator(store)
    assert service.task_statistics(project_id="2").total == 0
    assert service.task_statistics(project_id="1").total == 2

    by_user = service.task_statistics(user_id="2")
    assert by_user.total == 1
    assert by_user.completed == 1


def test_scope_by_creation_date(store):
    service = aggregator(store)
    assert service.task_statistics(date_from=date(2025, 11, 16)).total == 1
    assert service.task_statistics(date_to=date(2025, 11, 15)).total == 1
    assert service.task_statistics(date_from=date(2025, 11, 15), date_to=date(2025, 11, 20)).total == 2


def test_user_performance(store):
    performance = aggregator(store).user_performance("2")
    assert performance.tasks_completed_this_month == 1
    assert performance.average_completion_time == 272.0
    assert performance.on_time_delivery_rate == 100.0
    assert performance.quality_score is None


def test_user_performance_late_delivery():
    store = EntityStore().init({"tasks": [
        make_task("1", assigneeId="5", status="COMPLETED", dueDate="2025-11-20", completedAt="2025-11-21T09:00:00"),
        make_task("2", assigneeId="5", status="COMPLETED", dueDate="2025-11-20", completedAt="2025-11-19T09:00:00"),
        make_task("3", assigneeId="5", status="COMPLETED", dueDate="2025-11-20", completedAt="2025-11-20T23:00:00"),
    ]})
    assert aggregator(store).user_performance("5").on_time_delivery_rate == 66.7


def test_user_performance_without_tasks(store):
    performance = aggregator(store).user_performance("4")
    assert performance.tasks_completed_this_month == 0
    assert performance.on_time_delivery_rate == 0.0
