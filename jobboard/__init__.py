"""
Job Board Backend
Students, companies and admins over a MongoDB document store.

Architecture:
- MongoDB: users, students, companies, admins, jobs, appliedjobs
- JWT session tokens carried in a custom header
- One authentication gate shared by every principal kind
"""

__version__ = "1.0.0"
