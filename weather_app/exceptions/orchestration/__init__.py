from weather_app.exceptions.orchestration.workflow_error import WorkflowError

__all__ = ["WorkflowError"]
