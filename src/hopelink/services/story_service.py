import logging

from hopelink.core.errors import NotFoundError
from hopelink.data_access.memory import MemoryDataAccess
from hopelink.models.story import Story, StoryCreate

logger = logging.getLogger(__name__)

class StoryService:
    def __init__(self, data_access: MemoryDataAccess):
        self.data_access = data_access

    def list_stories(self, author_id: int | None = None, initiative_id: int | None = None) -> list[Story]:
        if author_id is not None:
            return self.data_access.get_stories_by_author(author_id)
        if initiative_id is not None:
            return self.data_access.get_stories_by_initiative(initiative_id)
        return self.data_access.get_stories()

    def get_story(self, story_id: int) -> Story:
        story = self.data_access.get_story(story_id)
        if not story:
            logger.warning(f"Story {story_id} not found")
            raise NotFoundError("Story not found")
        return story

    def create_story(self, story: StoryCreate) -> Story:
        created = self.data_access.create_story(story)
        logger.info(f"User {created.author_id} shared story {created.id}")
        return created

    def update_story(self, story_id: int, updates: dict) -> Story:
        story = self.data_access.update_story(story_id, updates)
        if not story:
            logger.warning(f"Story {story_id} not found")
            raise NotFoundError("Story not found")
        return story

    def heart_story(self, story_id: int) -> Story:
        story = self.data_access.heart_story(story_id)
        if not story:
            logger.warning(f"Story {story_id} not found")
            raise NotFoundError("Story not found")
        return story
