# credgraph/api/builtins/credential_types.py
"""
GraphQL types for the third-party authentication credentials stored on a user.

create_credential_types() returns the type-sets for the credential collection
(User.credentials) and one credential type per identity provider. Provider
records are read-only here; every read of a provider field goes through the
permission gate in credgraph.api.permissions.

Picture fields reproduce each provider's image URL conventions:
- Google: the `sz` query parameter selects a square size
- Twitter: the `_normal.` filename suffix selects a size variant
- Facebook: Graph API `/picture` endpoint with `width`/`height`
"""
import re
from typing import Dict, List, Optional
from urllib.parse import parse_qsl, quote, urlencode, urlsplit, urlunsplit

from credgraph.api.permissions import create_credential_resolver
from credgraph.api.type_set import (
    ArgumentDefinition,
    EnumTypeDefinition,
    EnumValueDefinition,
    FieldDefinition,
    ObjectTypeDefinition,
    TypeSet,
)

FACEBOOK_GRAPH_URL = "https://graph.facebook.com/v2.3"
PICTURE_DESCRIPTION = "The URL of the person's profile picture."
TWITTER_NORMAL_TOKEN = re.compile(r"_normal\.")

# Characters encodeURIComponent leaves alone, so query strings match the providers' own
_QUERY_SAFE = "!~*'()"

PROVIDERS = ("auth0", "facebook", "github", "google", "twitter")


def _encode_query(pairs) -> str:
    return urlencode(pairs, quote_via=quote, safe=_QUERY_SAFE)


def get_base_credential_fields(provider_name: str) -> Dict[str, FieldDefinition]:
    return {
        "accessToken": FieldDefinition(
            type="String",
            description=f"The OAuth access token obtained for the {provider_name} "
                        "user during authentication.",
        ),
        "displayName": FieldDefinition(
            type="String",
            description=f"The {provider_name} user's full name.",
        ),
        "id": FieldDefinition(
            type="String",
            description=f"The {provider_name} user's ID.",
            metadata={"unique": True},
        ),
    }


def resolve_facebook_picture(parent, info, width: Optional[int] = None, height: Optional[int] = None) -> Optional[str]:
    user_id = parent.get("id")
    if not user_id:
        return None
    url = f"{FACEBOOK_GRAPH_URL}/{user_id}/picture"
    query = _encode_query([(k, v) for k, v in (("width", width), ("height", height)) if v is not None])
    if query:
        url += "?" + query
    return url


def resolve_google_picture(parent, info, size: Optional[int] = None) -> Optional[str]:
    url = parent.get("picture")
    if not url:
        return None
    try:
        parts = urlsplit(url)
    except ValueError:
        return url

    pairs = []
    replaced = False
    for key, value in parse_qsl(parts.query, keep_blank_values=True):
        if key != "sz":
            pairs.append((key, value))
        elif size and not replaced:
            # keep sz where it was
            pairs.append((key, size))
            replaced = True
    if size and not replaced:
        pairs.append(("sz", size))
    return urlunsplit(parts._replace(query=_encode_query(pairs)))


def resolve_twitter_picture(parent, info, size: Optional[str] = "original") -> Optional[str]:
    url = parent.get("picture")
    if not url:
        return None
    if size is None or size == "original":
        return TWITTER_NORMAL_TOKEN.sub(".", url, count=1)
    return TWITTER_NORMAL_TOKEN.sub(f"_{size}.", url, count=1)


TWITTER_PICTURE_SIZE = EnumTypeDefinition(
    name="ReindexTwitterPictureSize",
    description="Size variant of a Twitter profile picture.",
    values={
        "normal": EnumValueDefinition(description="48px by 48px"),
        "bigger": EnumValueDefinition(description="73px by 73px"),
        "mini": EnumValueDefinition(description="24px by 24px"),
        "original": EnumValueDefinition(description="Original size"),
    },
)


def create_credential_types() -> List[TypeSet]:
    auth0_credential = ObjectTypeDefinition(
        name="ReindexAuth0Credential",
        description="Auth0 user profile.",
        fields={
            **get_base_credential_fields("Auth0"),
            "email": FieldDefinition(
                type="String",
                description="The email address stored in the Auth0 user profile.",
            ),
            "picture": FieldDefinition(type="String", description=PICTURE_DESCRIPTION),
        },
    )
    github_credential = ObjectTypeDefinition(
        name="ReindexGithubCredential",
        description="GitHub authentication credentials.",
        fields={
            **get_base_credential_fields("GitHub"),
            "email": FieldDefinition(
                type="String",
                description="The GitHub user's (public) email address.",
            ),
            "picture": FieldDefinition(type="String", description=PICTURE_DESCRIPTION),
            "username": FieldDefinition(
                type="String",
                description="The user's GitHub username.",
            ),
        },
    )
    facebook_credential = ObjectTypeDefinition(
        name="ReindexFacebookCredential",
        description="Facebook authentication credentials.",
        fields={
            **get_base_credential_fields("Facebook"),
            "email": FieldDefinition(
                type="String",
                description="The Facebook user's email address.",
            ),
            "picture": FieldDefinition(
                type="String",
                description=PICTURE_DESCRIPTION,
                args={
                    "height": ArgumentDefinition(
                        type="Int",
                        description="The height of this picture in pixels.",
                    ),
                    "width": ArgumentDefinition(
                        type="Int",
                        description="The width of this picture in pixels.",
                    ),
                },
                metadata={"computed": True},
                resolve=resolve_facebook_picture,
            ),
        },
    )
    google_credential = ObjectTypeDefinition(
        name="ReindexGoogleCredential",
        description="Google authentication credentials.",
        fields={
            **get_base_credential_fields("Google"),
            "email": FieldDefinition(
                type="String",
                description="Google account email address.",
            ),
            "picture": FieldDefinition(
                type="String",
                description=PICTURE_DESCRIPTION,
                args={
                    "size": ArgumentDefinition(
                        type="Int",
                        description="Dimension of each side in pixels. If given, the "
                                    "image will be resized and cropped to a square.",
                    ),
                },
                resolve=resolve_google_picture,
            ),
        },
    )
    twitter_credential = ObjectTypeDefinition(
        name="ReindexTwitterCredential",
        description="Twitter authentication credentials.",
        fields={
            **get_base_credential_fields("Twitter"),
            "accessTokenSecret": FieldDefinition(
                type="String",
                description="The OAuth token secret obtained for the Twitter user "
                            "during authentication.",
            ),
            "picture": FieldDefinition(
                type="String",
                description=PICTURE_DESCRIPTION,
                args={
                    "size": ArgumentDefinition(
                        type=TWITTER_PICTURE_SIZE.name,
                        description="Size of the profile picture.",
                        default_value="original",
                    ),
                },
                resolve=resolve_twitter_picture,
            ),
            "username": FieldDefinition(
                type="String",
                description="The user's Twitter screen name.",
            ),
        },
    )

    credential_collection = ObjectTypeDefinition(
        name="ReindexCredentialCollection",
        description="The credentials of the user in different authentication services.",
        fields={
            "auth0": FieldDefinition(
                type=auth0_credential.name,
                description="The Auth0 user profile of the authenticated user.",
                resolve=create_credential_resolver("auth0"),
            ),
            "facebook": FieldDefinition(
                type=facebook_credential.name,
                description="The Facebook credentials of the authenticated user.",
                resolve=create_credential_resolver("facebook"),
            ),
            "github": FieldDefinition(
                type=github_credential.name,
                description="The GitHub credentials of the authenticated user.",
                resolve=create_credential_resolver("github"),
            ),
            "google": FieldDefinition(
                type=google_credential.name,
                description="The Google credentials of the authenticated user.",
                resolve=create_credential_resolver("google"),
            ),
            "twitter": FieldDefinition(
                type=twitter_credential.name,
                description="The Twitter credentials of the authenticated user.",
                resolve=create_credential_resolver("twitter"),
            ),
        },
    )

    return [
        TypeSet(type=credential_collection),
        TypeSet(type=auth0_credential),
        TypeSet(type=facebook_credential),
        TypeSet(type=github_credential),
        TypeSet(type=google_credential),
        TypeSet(type=twitter_credential, enums=[TWITTER_PICTURE_SIZE]),
    ]
