"""
Schema for the admin dashboard summary.
"""

from pydantic import BaseModel


class DashboardStats(BaseModel):
    total_projects: int
    total_skills: int
    total_experiences: int
    total_messages: int
    unread_messages: int
