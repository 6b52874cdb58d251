from credgraph.api.builtins.credential_types import (
    resolve_facebook_picture,
    resolve_google_picture,
    resolve_twitter_picture,
)

GOOGLE_URL = "https://lh3.googleusercontent.com/a/photo?sz=50"
TWITTER_URL = "http://pbs.twimg.com/profile_images/1/avatar_normal.png"


class TestGooglePicture:
    def test_size_sets_sz(self):
        assert resolve_google_picture({"picture": GOOGLE_URL}, None, size=100) == (
            "https://lh3.googleusercontent.com/a/photo?sz=100"
        )

    def test_no_size_removes_sz(self):
        assert resolve_google_picture({"picture": GOOGLE_URL}, None) == (
            "https://lh3.googleusercontent.com/a/photo"
        )

    def test_sz_keeps_position_among_other_params(self):
        parent = {"picture": "https://lh3.googleusercontent.com/a/photo?sz=50&v=2"}
        assert resolve_google_picture(parent, None, size=96) == (
            "https://lh3.googleusercontent.com/a/photo?sz=96&v=2"
        )
        assert resolve_google_picture(parent, None) == (
            "https://lh3.googleusercontent.com/a/photo?v=2"
        )

    def test_sz_appended_when_missing(self):
        parent = {"picture": "https://lh3.googleusercontent.com/a/photo"}
        assert resolve_google_picture(parent, None, size=64) == (
            "https://lh3.googleusercontent.com/a/photo?sz=64"
        )

    def test_missing_picture_is_null(self):
        assert resolve_google_picture({}, None, size=100) is None
        assert resolve_google_picture({"picture": ""}, None) is None

    def test_unparseable_url_is_returned_unchanged(self):
        broken = "http://[::1/photo?sz=50"
        assert resolve_google_picture({"picture": broken}, None, size=10) == broken


class TestTwitterPicture:
    def test_size_variant(self):
        assert resolve_twitter_picture({"picture": TWITTER_URL}, None, size="bigger") == (
            "http://pbs.twimg.com/profile_images/1/avatar_bigger.png"
        )

    def test_original_is_default(self):
        expected = "http://pbs.twimg.com/profile_images/1/avatar.png"
        assert resolve_twitter_picture({"picture": TWITTER_URL}, None) == expected
        assert resolve_twitter_picture({"picture": TWITTER_URL}, None, size="original") == expected

    def test_only_first_token_replaced(self):
        parent = {"picture": "http://pbs.twimg.com/a_normal.b_normal.png"}
        assert resolve_twitter_picture(parent, None, size="mini") == (
            "http://pbs.twimg.com/a_mini.b_normal.png"
        )

    def test_url_without_token_is_unchanged(self):
        parent = {"picture": "http://pbs.twimg.com/profile_images/1/avatar.png"}
        assert resolve_twitter_picture(parent, None, size="normal") == parent["picture"]

    def test_missing_picture_is_null(self):
        assert resolve_twitter_picture({"picture": None}, None) is None


class TestFacebookPicture:
    def test_width_and_height(self):
        assert resolve_facebook_picture({"id": "123"}, None, width=50, height=50) == (
            "https://graph.facebook.com/v2.3/123/picture?width=50&height=50"
        )

    def test_no_args_no_query_string(self):
        assert resolve_facebook_picture({"id": "123"}, None) == (
            "https://graph.facebook.com/v2.3/123/picture"
        )

    def test_null_args_skipped(self):
        assert resolve_facebook_picture({"id": "123"}, None, width=None, height=200) == (
            "https://graph.facebook.com/v2.3/123/picture?height=200"
        )

    def test_missing_id_is_null(self):
        assert resolve_facebook_picture({}, None, width=0) is None
        assert resolve_facebook_picture({"id": None}, None) is None
