"""Tests for the in-memory store: donation ledger, conversation index, lookups."""

from datetime import datetime

import pytest

from hopelink.models.donation import DonationCreate, SupportCreate
from hopelink.models.message import MessageCreate
from hopelink.models.story import StoryCreate


def donate(data_access, donor_id, initiative_id, amount):
    return data_access.create_donation(
        DonationCreate(donor_id=donor_id, initiative_id=initiative_id, amount=amount)
    )


def send(data_access, sender_id, receiver_id, content="hi"):
    return data_access.create_message(
        MessageCreate(sender_id=sender_id, receiver_id=receiver_id, content=content)
    )


class TestDonationLedger:

    def test_new_initiative_starts_empty(self, make_initiative):
        initiative = make_initiative()
        assert initiative.raised_amount == 0
        assert initiative.supporters_count == 0

    @pytest.mark.parametrize("donations", [
        [(1, 500)],
        [(1, 500), (1, 250)],
        [(1, 100), (2, 200), (3, 300)],
        [(4, 50), (5, 75), (4, 25), (6, 10), (5, 5)],
    ])
    def test_totals_follow_donation_history(self, data_access, make_initiative, donations):
        initiative = make_initiative()

        for donor_id, amount in donations:
            donate(data_access, donor_id, initiative.id, amount)

        updated = data_access.get_initiative(initiative.id)
        assert updated.raised_amount == sum(amount for _, amount in donations)
        assert updated.supporters_count == len({donor_id for donor_id, _ in donations})

    def test_donations_only_touch_their_initiative(self, data_access, make_initiative):
        first = make_initiative(title="First")
        second = make_initiative(title="Second")

        donate(data_access, 1, first.id, 1000)
        donate(data_access, 2, first.id, 500)

        assert data_access.get_initiative(first.id).raised_amount == 1500
        untouched = data_access.get_initiative(second.id)
        assert untouched.raised_amount == 0
        assert untouched.supporters_count == 0

    def test_unknown_initiative_records_nothing(self, data_access):
        assert donate(data_access, 1, 99, 100) is None
        assert data_access.get_donations_by_donor(1) == []

    def test_donation_ids_increment(self, data_access, make_initiative):
        initiative = make_initiative()
        first = donate(data_access, 1, initiative.id, 10)
        second = donate(data_access, 1, initiative.id, 10)
        assert (first.id, second.id) == (1, 2)

    def test_donation_lookups(self, data_access, make_initiative):
        a = make_initiative()
        b = make_initiative()
        donate(data_access, 1, a.id, 10)
        donate(data_access, 1, b.id, 20)
        donate(data_access, 2, b.id, 30)

        assert [d.amount for d in data_access.get_donations_by_donor(1)] == [10, 20]
        assert [d.amount for d in data_access.get_donations_by_initiative(b.id)] == [20, 30]
        assert data_access.get_donation(3).donor_id == 2


class TestConversationIndex:

    def test_one_entry_per_counterparty_with_latest_message(self, data_access):
        send(data_access, 1, 2, "first to 2")
        send(data_access, 3, 1, "first from 3")
        send(data_access, 2, 1, "reply from 2")
        send(data_access, 1, 3, "reply to 3")
        send(data_access, 4, 5, "not involving 1")

        conversations = data_access.get_conversations_for_user(1)

        assert len(conversations) == 2
        by_counterparty = {m.counterparty_of(1): m.content for m in conversations}
        assert by_counterparty == {2: "reply from 2", 3: "reply to 3"}

    def test_most_recent_conversation_first(self, data_access):
        send(data_access, 1, 2)
        send(data_access, 1, 3)
        send(data_access, 2, 1)

        conversations = data_access.get_conversations_for_user(1)
        assert [m.counterparty_of(1) for m in conversations] == [2, 3]

    def test_uses_creation_time_over_insert_order(self, data_access):
        first = send(data_access, 1, 2, "dated later")
        second = send(data_access, 2, 1, "dated earlier")
        messages = data_access.tables["messages"]
        messages[first.id] = first.model_copy(update={"created_at": datetime(2024, 5, 2)})
        messages[second.id] = second.model_copy(update={"created_at": datetime(2024, 5, 1)})

        [latest] = data_access.get_conversations_for_user(1)
        assert latest.content == "dated later"

    def test_no_messages(self, data_access):
        send(data_access, 2, 3)
        assert data_access.get_conversations_for_user(1) == []

    def test_thread_is_chronological_and_scoped_to_the_pair(self, data_access):
        send(data_access, 1, 2, "a")
        send(data_access, 2, 1, "b")
        send(data_access, 1, 3, "elsewhere")
        send(data_access, 1, 2, "c")

        thread = data_access.get_messages_between_users(2, 1)
        assert [m.content for m in thread] == ["a", "b", "c"]

    def test_mark_read_is_idempotent(self, data_access):
        message = send(data_access, 1, 2)
        assert message.read is False

        once = data_access.mark_message_as_read(message.id)
        twice = data_access.mark_message_as_read(message.id)

        assert once == twice
        assert data_access.get_message(message.id).read is True

    def test_mark_read_unknown_message(self, data_access):
        assert data_access.mark_message_as_read(42) is None


class TestLookups:

    def test_user_lookup_by_email_ignores_case(self, data_access, make_user):
        user = make_user("ana")
        assert data_access.get_user_by_email("ANA@example.com").id == user.id
        assert data_access.get_user_by_email("nobody@example.com") is None

    def test_users_by_type(self, data_access, make_user):
        make_user("d1", "donor")
        make_user("b1", "beneficiary")
        make_user("d2", "donor")
        assert [u.username for u in data_access.get_users_by_type("donor")] == ["d1", "d2"]

    def test_update_user_unknown(self, data_access):
        assert data_access.update_user(7, {"bio": "x"}) is None

    def test_initiatives_newest_first(self, data_access, make_initiative):
        first = make_initiative(title="first")
        second = make_initiative(title="second")
        assert [i.id for i in data_access.get_initiatives()] == [second.id, first.id]

    def test_initiative_filters(self, data_access, make_initiative):
        make_initiative(runner_id=1, category="education", country="India")
        make_initiative(runner_id=2, category="livelihood", country="Kenya")
        make_initiative(runner_id=1, category="livelihood")

        assert len(data_access.get_initiatives_by_runner(1)) == 2
        assert len(data_access.get_initiatives_by_category("livelihood")) == 2
        assert len(data_access.get_initiatives_by_country("Kenya")) == 1
        assert data_access.get_available_countries() == ["India", "Kenya", "United States"]

    def test_heart_story(self, data_access):
        story = data_access.create_story(StoryCreate(content="We did it", author_id=3))
        data_access.heart_story(story.id)
        hearted = data_access.heart_story(story.id)
        assert hearted.hearts_count == 2
        assert data_access.heart_story(99) is None

    def test_stories_by_author_and_initiative(self, data_access):
        data_access.create_story(StoryCreate(content="one", author_id=1, initiative_id=5))
        data_access.create_story(StoryCreate(content="two", author_id=2, initiative_id=5))
        data_access.create_story(StoryCreate(content="three", author_id=1))

        assert [s.content for s in data_access.get_stories_by_author(1)] == ["one", "three"]
        assert [s.content for s in data_access.get_stories_by_initiative(5)] == ["one", "two"]
        assert [s.content for s in data_access.get_stories()] == ["three", "two", "one"]

    def test_supports(self, data_access):
        data_access.create_support(SupportCreate(donor_id=1, beneficiary_id=2, initiative_id=3))
        data_access.create_support(SupportCreate(donor_id=4, beneficiary_id=2, initiative_id=3))

        assert len(data_access.get_supports_by_beneficiary(2)) == 2
        assert [s.id for s in data_access.get_supports_by_donor(4)] == [2]
        assert data_access.get_support(1).donor_id == 1
