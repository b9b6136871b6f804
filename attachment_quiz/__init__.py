# This file makes the 'attachment_quiz' directory a Python package.
