"""
Test the storage services against the in-memory database
"""

import pytest

from portfolio_api.app.schemas.experience import ExperienceCreate, ExperienceUpdate
from portfolio_api.app.schemas.message import MessageCreate
from portfolio_api.app.schemas.profile import ProfileUpdate
from portfolio_api.app.schemas.project import ProjectCreate, ProjectUpdate
from portfolio_api.app.schemas.skill import SkillCreate, SkillUpdate
from portfolio_api.app.schemas.user import UserCreate


def make_project(**overrides) -> ProjectCreate:
    data = {
        "title": "Portfolio Site",
        "description": "A personal site",
        "technologies": ["Python", "FastAPI"],
        "live_url": "https://example.com",
        "status": "published",
        "featured": False,
    }
    data.update(overrides)
    return ProjectCreate(**data)


def make_skill(**overrides) -> SkillCreate:
    data = {"name": "Python", "category": "backend", "level": "expert", "percentage": 90}
    data.update(overrides)
    return SkillCreate(**data)


def make_experience(**overrides) -> ExperienceCreate:
    data = {
        "title": "Developer",
        "company": "Acme",
        "period": "2020 - 2022",
        "description": "Built things",
        "technologies": ["Python"],
        "order": 0,
    }
    data.update(overrides)
    return ExperienceCreate(**data)


def make_message(**overrides) -> MessageCreate:
    data = {
        "name": "Jane",
        "email": "jane@example.com",
        "subject": "Hello",
        "message": "Let's work together",
    }
    data.update(overrides)
    return MessageCreate(**data)


# Users and profile

@pytest.mark.asyncio
async def test_seeded_admin_can_authenticate(storage):
    admin = await storage.users.get_user_by_username("admin")

    assert admin is not None
    assert await storage.users.get_user(admin.id) == admin
    assert await storage.users.authenticate("admin", "test-password") == admin
    assert await storage.users.authenticate("admin", "wrong") is None
    assert await storage.users.authenticate("nobody", "test-password") is None


@pytest.mark.asyncio
async def test_create_user_rejects_duplicate_username(storage):
    user = await storage.users.create_user(UserCreate(username="editor", password="pw"))

    assert user.password_hash != "pw"
    assert await storage.users.authenticate("editor", "pw") == user
    with pytest.raises(ValueError):
        await storage.users.create_user(UserCreate(username="editor", password="other"))


@pytest.mark.asyncio
async def test_get_unknown_user(storage):
    assert await storage.users.get_user(9999) is None
    assert await storage.users.get_user_by_username("ghost") is None


@pytest.mark.asyncio
async def test_seeded_profile(storage):
    profile = await storage.profiles.get_profile()

    assert profile is not None
    assert profile.name == "John Doe"
    assert profile.resume_url is None


@pytest.mark.asyncio
async def test_update_profile_is_partial(storage):
    before = await storage.profiles.get_profile()

    updated = await storage.profiles.update_profile(
        before.id, ProfileUpdate(title="Backend Engineer", github=None)
    )

    assert updated.title == "Backend Engineer"
    assert updated.github is None
    expected = before.model_dump(exclude={"title", "github"})
    assert updated.model_dump(exclude={"title", "github"}) == expected
    assert await storage.profiles.get_profile() == updated


@pytest.mark.asyncio
async def test_update_unknown_profile(storage):
    before = await storage.profiles.get_profile()

    assert await storage.profiles.update_profile(9999, ProfileUpdate(name="X")) is None
    assert await storage.profiles.get_profile() == before


# Projects

@pytest.mark.asyncio
async def test_create_and_get_project(storage):
    data = make_project()
    created = await storage.projects.create_project(data)

    assert created.id > 0
    assert created.created_at is not None
    assert created.model_dump(exclude={"id", "created_at"}) == data.model_dump()
    assert await storage.projects.get_project(created.id) == created


@pytest.mark.asyncio
async def test_update_project_keeps_omitted_fields(storage):
    created = await storage.projects.create_project(make_project())

    updated = await storage.projects.update_project(
        created.id, ProjectUpdate(title="Renamed", live_url=None)
    )

    assert updated.title == "Renamed"
    assert updated.live_url is None
    assert updated.created_at == created.created_at
    assert updated.model_dump(exclude={"title", "live_url"}) == created.model_dump(
        exclude={"title", "live_url"}
    )


@pytest.mark.asyncio
async def test_update_unknown_project_does_not_create(storage):
    await storage.projects.create_project(make_project())
    before = await storage.projects.list_projects()

    assert await storage.projects.update_project(9999, ProjectUpdate(title="X")) is None
    assert await storage.projects.get_project(9999) is None
    assert await storage.projects.list_projects() == before


@pytest.mark.asyncio
async def test_delete_project_is_idempotent(storage):
    created = await storage.projects.create_project(make_project())

    assert await storage.projects.delete_project(created.id) is True
    assert await storage.projects.delete_project(created.id) is False
    assert await storage.projects.get_project(created.id) is None


@pytest.mark.asyncio
async def test_projects_newest_first(storage):
    first = await storage.projects.create_project(make_project(title="first"))
    second = await storage.projects.create_project(make_project(title="second"))
    third = await storage.projects.create_project(make_project(title="third"))

    projects = await storage.projects.list_projects()

    assert [p.id for p in projects] == [third.id, second.id, first.id]


@pytest.mark.asyncio
async def test_featured_requires_featured_and_published(storage):
    old = await storage.projects.create_project(make_project(featured=True, status="published"))
    await storage.projects.create_project(make_project(featured=True, status="draft"))
    await storage.projects.create_project(make_project(featured=False, status="published"))
    new = await storage.projects.create_project(make_project(featured=True, status="published"))

    featured = await storage.projects.list_featured_projects()

    assert [p.id for p in featured] == [new.id, old.id]


@pytest.mark.asyncio
async def test_unfeatured_project_never_featured(storage):
    created = await storage.projects.create_project(make_project(featured=False))

    assert created.id not in [p.id for p in await storage.projects.list_featured_projects()]

    await storage.projects.update_project(created.id, ProjectUpdate(featured=True))
    assert [p.id for p in await storage.projects.list_featured_projects()] == [created.id]


# Skills

@pytest.mark.asyncio
async def test_create_and_get_skill(storage):
    data = make_skill()
    created = await storage.skills.create_skill(data)

    assert created.id > 0
    assert created.model_dump(exclude={"id"}) == data.model_dump()
    assert await storage.skills.get_skill(created.id) == created


@pytest.mark.asyncio
async def test_skills_by_category_is_exact(storage):
    react = await storage.skills.create_skill(make_skill(name="React", category="frontend"))
    css = await storage.skills.create_skill(make_skill(name="CSS", category="frontend"))
    await storage.skills.create_skill(make_skill(name="Django", category="backend"))

    frontend = await storage.skills.list_skills_by_category("frontend")

    assert sorted(s.id for s in frontend) == sorted([react.id, css.id])
    assert await storage.skills.list_skills_by_category("Frontend") == []
    assert await storage.skills.list_skills_by_category("design") == []
    assert len(await storage.skills.list_skills()) == 3


@pytest.mark.asyncio
async def test_storage_does_not_validate_skill_values(storage):
    unchecked = SkillCreate.model_construct(
        name="Juggling", category="circus", level="legendary", percentage=150
    )

    skill = await storage.skills.create_skill(unchecked)

    assert skill.category == "circus"
    assert skill.percentage == 150
    assert await storage.skills.list_skills_by_category("circus") == [skill]


@pytest.mark.asyncio
async def test_update_and_delete_skill(storage):
    skill = await storage.skills.create_skill(make_skill())

    updated = await storage.skills.update_skill(skill.id, SkillUpdate(percentage=95))
    assert updated.percentage == 95
    assert updated.name == skill.name

    assert await storage.skills.update_skill(9999, SkillUpdate(percentage=1)) is None
    assert await storage.skills.delete_skill(skill.id) is True
    assert await storage.skills.delete_skill(skill.id) is False
    assert await storage.skills.get_skill(skill.id) is None


# Experiences

@pytest.mark.asyncio
async def test_create_and_get_experience(storage):
    data = make_experience(current=True, order=2)
    created = await storage.experiences.create_experience(data)

    assert created.id > 0
    assert created.model_dump(exclude={"id"}) == data.model_dump()
    assert await storage.experiences.get_experience(created.id) == created


@pytest.mark.asyncio
async def test_experiences_sorted_by_order_desc(storage):
    low = await storage.experiences.create_experience(make_experience(order=1))
    high = await storage.experiences.create_experience(make_experience(order=5))
    tie_first = await storage.experiences.create_experience(make_experience(order=3))
    tie_second = await storage.experiences.create_experience(make_experience(order=3))

    experiences = await storage.experiences.list_experiences()

    assert [e.id for e in experiences] == [high.id, tie_first.id, tie_second.id, low.id]


@pytest.mark.asyncio
async def test_update_experience_order(storage):
    a = await storage.experiences.create_experience(make_experience(order=2))
    b = await storage.experiences.create_experience(make_experience(order=1))

    await storage.experiences.update_experience(b.id, ExperienceUpdate(order=10, current=True))

    experiences = await storage.experiences.list_experiences()
    assert [e.id for e in experiences] == [b.id, a.id]
    assert experiences[0].current is True
    assert experiences[0].company == "Acme"
    assert await storage.experiences.update_experience(9999, ExperienceUpdate(order=1)) is None
    assert await storage.experiences.delete_experience(a.id) is True
    assert await storage.experiences.get_experience(a.id) is None


# Messages

@pytest.mark.asyncio
async def test_create_message_is_unread(storage):
    data = make_message()
    created = await storage.messages.create_message(data)

    assert created.read is False
    assert created.created_at is not None
    assert created.model_dump(exclude={"id", "read", "created_at"}) == data.model_dump()
    assert await storage.messages.get_message(created.id) == created


@pytest.mark.asyncio
async def test_mark_message_as_read_changes_only_read(storage):
    older = await storage.messages.create_message(make_message(subject="older"))
    newer = await storage.messages.create_message(make_message(subject="newer"))
    order_before = [m.id for m in await storage.messages.list_messages()]

    assert await storage.messages.mark_message_as_read(older.id) is True

    marked = await storage.messages.get_message(older.id)
    assert marked.read is True
    assert marked.model_dump(exclude={"read"}) == older.model_dump(exclude={"read"})
    assert [m.id for m in await storage.messages.list_messages()] == order_before
    assert order_before == [newer.id, older.id]


@pytest.mark.asyncio
async def test_mark_unknown_message(storage):
    assert await storage.messages.mark_message_as_read(9999) is False


@pytest.mark.asyncio
async def test_unread_count_and_delete(storage):
    first = await storage.messages.create_message(make_message())
    await storage.messages.create_message(make_message())
    await storage.messages.mark_message_as_read(first.id)

    assert await storage.messages.count_unread_messages() == 1

    assert await storage.messages.delete_message(first.id) is True
    assert await storage.messages.delete_message(first.id) is False
    assert len(await storage.messages.list_messages()) == 1


# Identity and statistics

@pytest.mark.asyncio
async def test_ids_shared_across_kinds_and_never_reused(storage):
    project = await storage.projects.create_project(make_project())
    skill = await storage.skills.create_skill(make_skill())
    await storage.projects.delete_project(project.id)
    message = await storage.messages.create_message(make_message())

    assert skill.id == project.id + 1
    assert message.id == skill.id + 1


@pytest.mark.asyncio
async def test_statistics_overview(storage):
    await storage.projects.create_project(make_project())
    await storage.skills.create_skill(make_skill())
    await storage.skills.create_skill(make_skill(name="Go"))
    read = await storage.messages.create_message(make_message())
    await storage.messages.create_message(make_message())
    await storage.messages.mark_message_as_read(read.id)

    stats = await storage.statistics.overview()

    assert stats.total_projects == 1
    assert stats.total_skills == 2
    assert stats.total_experiences == 0
    assert stats.total_messages == 2
    assert stats.unread_messages == 1
