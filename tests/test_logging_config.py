import json
import logging

from attachment_quiz.constants import ResultType
from attachment_quiz.core.logging_config import QuizJsonFormatter, SERVICE_NAME


def _format(**extra) -> dict:
    record = logging.LogRecord("attachment_quiz.routers.survey", logging.INFO, __file__, 10,
                               "Submission classified", None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return json.loads(QuizJsonFormatter('%(name)s %(message)s').format(record))


def test_log_line_carries_service_and_level():
    line = _format()
    assert line["service"] == SERVICE_NAME
    assert line["level"] == "INFO"
    assert line["logger"] == "attachment_quiz.routers.survey"
    assert line["message"] == "Submission classified"
    assert line["timestamp"].endswith("+00:00")


def test_result_type_extra_written_as_plain_value():
    line = _format(result_type=ResultType.FEARFUL, anxiety_point=4.0)
    assert line["result_type"] == "fearful"
    assert line["anxiety_point"] == 4.0
