from .models import Base, SurveyResponse
from .session import Database
