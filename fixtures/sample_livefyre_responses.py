"""
Sample Livefyre StreamHub payloads for client testing.
Shapes follow the bootstrap (init, page) and write (post, delete, unfollow) APIs.
"""


def get_collection_info_plus() -> dict:
    """Bootstrap init payload for a collection with one comment."""
    return {
        "collectionSettings": {
            "collectionId": "151197711",
            "title": "Sample article",
            "url": "https://example.com/articles/sample",
            "archiveInfo": {"nPages": 1, "pageInfo": {"0": {"first": 1453800000, "last": 1453810000}}},
            "numVisible": 1,
            "followers": 0,
        },
        "headDocument": {
            "content": [
                {
                    "vis": 1,
                    "content": {
                        "id": "412345678",
                        "bodyHtml": "<p>First!</p>",
                        "authorId": "user-1@livefyre.fyre.co",
                        "createdAt": 1453810000,
                    },
                }
            ],
            "authors": {
                "user-1@livefyre.fyre.co": {"displayName": "Reader One"},
            },
        },
        "networkSettings": {},
        "siteSettings": {},
    }


def get_comments_page() -> dict:
    """Archived page of comments."""
    return {
        "content": [
            {
                "vis": 1,
                "content": {
                    "id": "412345600",
                    "bodyHtml": "<p>Older comment</p>",
                    "authorId": "user-2@livefyre.fyre.co",
                    "createdAt": 1453800000,
                },
            }
        ],
        "authors": {
            "user-2@livefyre.fyre.co": {"displayName": "Reader Two"},
        },
        "followers": [],
    }


def get_post_comment_ok() -> dict:
    """Successful write-API answer for a new comment."""
    return {
        "status": "ok",
        "code": 200,
        "data": {
            "messages": [
                {
                    "content": {
                        "id": "412345679",
                        "bodyHtml": "<p>Hello</p>",
                        "authorId": "user-1@livefyre.fyre.co",
                    },
                    "collectionId": "151197711",
                }
            ],
            "authors": {"user-1@livefyre.fyre.co": {"displayName": "Reader One"}},
        },
    }


def get_status_ok() -> dict:
    """Generic write-API success (delete, unfollow)."""
    return {"status": "ok", "code": 200, "data": {}}


def get_wrong_domain() -> dict:
    """Answer Livefyre sends when the collection belongs to another site."""
    return {"status": "error", "code": 403, "msg": "Wrong domain"}
