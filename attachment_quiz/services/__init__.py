from .storage import StorageError, SurveyResponseStore
