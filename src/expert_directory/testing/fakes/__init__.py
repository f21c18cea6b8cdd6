"""Testing fakes – in-memory doubles for the application ports."""
from expert_directory.testing.fakes.navigator import RecordingNavigator
from expert_directory.testing.fakes.notifier import RecordingNotifier
from expert_directory.testing.fakes.search_api import ScriptedSearchApi

__all__ = ["RecordingNavigator", "RecordingNotifier", "ScriptedSearchApi"]
