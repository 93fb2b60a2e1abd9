"""Tests for objective lifecycle transitions."""
import pytest
from conftest import goal_doc, make_db


def make_goal(**overrides):
    from app.services.goal_service import GoalService

    return GoalService(make_db())._doc_to_goal(goal_doc(**overrides))


def apply(goal, plan):
    """Apply a planned change as the store would commit it."""
    return goal.model_copy(update=plan.changes)


class TestPlanProgress:
    """Tests for plan_progress."""

    def test_increment_changes_value_only(self):
        from app.utils.objectives import plan_progress

        plan = plan_progress(make_goal(current_value=1), 1)

        assert plan.changes == {"current_value": 2}
        assert plan.event is None

    def test_reaching_target_completes(self):
        from app.models.goal import GoalEvent
        from app.utils.objectives import plan_progress

        plan = plan_progress(make_goal(current_value=4, target_value=5), 1)

        assert plan.changes == {"current_value": 5, "completed": True}
        assert plan.event == GoalEvent.TARGET_REACHED

    def test_regression_reopens(self):
        from app.models.goal import GoalEvent
        from app.utils.objectives import plan_progress

        plan = plan_progress(
            make_goal(current_value=5, target_value=5, completed=True), -1
        )

        assert plan.changes == {"current_value": 4, "completed": False}
        assert plan.event == GoalEvent.REOPENED

    def test_exceeding_target_while_completed(self):
        from app.utils.objectives import plan_progress

        plan = plan_progress(
            make_goal(current_value=5, target_value=5, completed=True), 3
        )

        assert plan.changes == {"current_value": 8}
        assert plan.event is None

    def test_negative_result_rejected(self):
        from app.errors import FieldValidationError
        from app.utils.objectives import plan_progress

        goal = make_goal(current_value=0)

        with pytest.raises(FieldValidationError) as exc:
            plan_progress(goal, -1)

        assert "current_value" in exc.value.errors
        assert goal.current_value == 0

    def test_large_delta(self):
        from app.utils.objectives import plan_progress

        plan = plan_progress(make_goal(current_value=0, target_value=5), 7)

        assert plan.changes == {"current_value": 7, "completed": True}

    def test_five_increments_then_one_back(self):
        from app.utils.objectives import plan_progress

        goal = make_goal(current_value=0, target_value=5, completed=False)
        for _ in range(5):
            goal = apply(goal, plan_progress(goal, 1))

        assert goal.completed is True
        assert goal.current_value == 5

        goal = apply(goal, plan_progress(goal, -1))

        assert goal.completed is False
        assert goal.current_value == 4


class TestPlanToggle:
    """Tests for plan_toggle."""

    def test_mark_complete_early(self):
        from app.models.goal import GoalEvent
        from app.utils.objectives import plan_toggle

        plan = plan_toggle(make_goal(current_value=1, target_value=5))

        assert plan.changes == {"completed": True}
        assert plan.event == GoalEvent.MARKED_COMPLETE

    def test_reopen_met_objective(self):
        from app.models.goal import GoalEvent
        from app.utils.objectives import plan_toggle

        plan = plan_toggle(make_goal(current_value=5, target_value=5, completed=True))

        assert plan.changes == {"completed": False}
        assert plan.event == GoalEvent.MARKED_ACTIVE


class TestGoalView:
    """Tests for the derived state and progress fields."""

    def test_progress_percent(self):
        goal = make_goal(current_value=2, target_value=5)

        assert goal.progress_percent == 40.0
        assert goal.state.value == "active"

    def test_progress_percent_capped(self):
        goal = make_goal(current_value=9, target_value=5, completed=True)

        assert goal.progress_percent == 100.0
        assert goal.state.value == "completed"

    def test_serialized_view(self):
        goal = make_goal(current_value=1, target_value=4)

        data = goal.model_dump(by_alias=True)
        assert data["state"] == "active"
        assert data["progress_percent"] == 25.0
        assert "id" in data
