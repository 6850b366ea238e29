"""OMCTI portal package.

Feature modules (attendance, users, payments, students, dashboard) sit on top
of a thin gateway to the institute's remote API, with Flask controllers as the
outer layer.
"""
