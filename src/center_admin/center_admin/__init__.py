"""NGO center administration package.

Feature modules (students, attendance, diary, feedback, reports, history)
each carry a model, a repository interface with MySQL and in-memory backends,
a service and a thin Flask controller.
"""
