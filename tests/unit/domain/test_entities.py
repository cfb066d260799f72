"""Unit tests for the profile and post aggregates."""

from uuid import uuid4

from domain.entities.embedded import index_of, pop_first
from domain.entities.post import Comment, Post
from domain.entities.profile import Profile, ProfilePatch, SocialLinks, split_skills


class TestEmbeddedHelpers:
    def test_pop_first_removes_only_first_match(self):
        items = [1, 2, 3, 2]

        assert pop_first(items, lambda x: x == 2) == 2
        assert items == [1, 3, 2]

    def test_pop_first_without_match_leaves_list_alone(self):
        items = [1, 2]

        assert pop_first(items, lambda x: x == 9) is None
        assert items == [1, 2]

    def test_index_of(self):
        assert index_of(["a", "b"], lambda x: x == "b") == 1
        assert index_of([], lambda x: True) is None


class TestSplitSkills:
    def test_splits_on_commas(self):
        assert split_skills("go,rust") == ["go", "rust"]

    def test_keeps_elements_as_typed(self):
        assert split_skills("go, rust,,") == ["go", " rust", "", ""]


class TestProfilePatch:
    def test_empty_values_are_not_set(self):
        patch = ProfilePatch.from_payload({"company": "", "status": "Dev", "skills": "go"})

        assert patch.set_fields() == {"status": "Dev"}
        assert patch.skills == ["go"]

    def test_absent_skills_leave_existing_list(self):
        profile = Profile(user_id=uuid4(), skills=["c"])

        ProfilePatch.from_payload({"bio": "hi"}).apply_to(profile)

        assert profile.skills == ["c"]
        assert profile.bio == "hi"

    def test_social_links_merge_per_network(self):
        profile = Profile(
            user_id=uuid4(), social=SocialLinks(twitter="t.co/ada", youtube="yt.com/ada")
        )

        ProfilePatch.from_payload({"youtube": "yt.com/new", "facebook": ""}).apply_to(profile)

        assert profile.social.to_dict() == {"twitter": "t.co/ada", "youtube": "yt.com/new"}

    def test_build_sets_owner(self):
        owner = uuid4()

        profile = ProfilePatch.from_payload({"status": "Dev", "skills": "go"}).build(owner)

        assert profile.user_id == owner
        assert profile.experience == []
        assert profile.version == 0


class TestPost:
    def test_like_state(self):
        liker = uuid4()
        post = Post(user_id=uuid4(), text="hello")

        post.add_like(liker)

        assert post.has_liked(liker)
        assert post.remove_like(liker).user_id == liker
        assert not post.has_liked(liker)
        assert post.remove_like(liker) is None

    def test_ownership(self):
        owner = uuid4()
        post = Post(user_id=owner, text="hello")

        assert post.is_owned_by(owner)
        assert not post.is_owned_by(uuid4())

    def test_find_comment(self):
        post = Post(user_id=uuid4(), text="hello")
        comment = Comment(user_id=uuid4(), text="yo")
        post.add_comment(comment)

        assert post.find_comment(comment.id) is comment
        assert post.find_comment(uuid4()) is None
