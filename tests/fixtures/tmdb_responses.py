"""
Mock TMDB API responses for testing.

Contains realistic responses from the TMDB API (details, search, find, changes)
and from the discovery service. These fixtures are used with respx to mock
httpx calls and, validated into resources, to feed the mapper directly.
"""

# Movie details with appended sub-resources
# GET /movie/603?append_to_response=alternative_titles,release_dates,videos,credits,translations&language=EN
TMDB_MOVIE_DETAILS_RESPONSE = {
    "adult": False,
    "backdrop_path": "/fNG7i7RqMErkcqhohV2a6cV1Ehy.jpg",
    "belongs_to_collection": {
        "id": 2344,
        "name": "The Matrix Collection",
        "poster_path": "/bV9qTVHTVf0gkW0j7p7M0ILD4pG.jpg",
        "backdrop_path": "",
    },
    "budget": 63000000,
    "genres": [
        {"id": 28, "name": "Action"},
        {"id": 878, "name": "Science Fiction"},
    ],
    "homepage": "http://www.warnerbros.com/matrix",
    "id": 603,
    "imdb_id": "tt0133093",
    "original_language": "en",
    "original_title": "The Matrix",
    "overview": "Set in the 22nd century, The Matrix tells the story of a computer hacker...",
    "popularity": 82.4,
    "poster_path": "/f89U3ADr1oiB1s9GkdPOEpXUk5H.jpg",
    "production_companies": [
        {"id": 79, "name": "Village Roadshow Pictures", "origin_country": "US"},
        {"id": 372, "name": "Groucho II Film Partnership", "origin_country": ""},
    ],
    "release_date": "1999-03-30",
    "revenue": 463517383,
    "runtime": 136,
    "status": "Released",
    "tagline": "Welcome to the Real World.",
    "title": "The Matrix",
    "video": False,
    "vote_average": 8.2,
    "vote_count": 24000,
    "alternative_titles": {
        "titles": [
            {"iso_3166_1": "US", "title": "The Matrix 1", "type": ""},
            {"iso_3166_1": "FR", "title": "La Matrice", "type": ""},
            {"iso_3166_1": "JP", "title": "Matorikkusu", "type": "romaji"},
        ]
    },
    "release_dates": {
        "results": [
            {
                "iso_3166_1": "US",
                "release_dates": [
                    {
                        "certification": "R",
                        "note": "",
                        "release_date": "1999-03-31T00:00:00.000Z",
                        "type": 3,
                    },
                    {
                        "certification": "R",
                        "note": "DVD",
                        "release_date": "1999-09-21T00:00:00.000Z",
                        "type": 5,
                    },
                ],
            },
            {
                "iso_3166_1": "GB",
                "release_dates": [
                    {
                        "certification": "15",
                        "note": "VOD",
                        "release_date": "1999-09-21T00:00:00.000Z",
                        "type": 4,
                    },
                    {
                        "certification": "15",
                        "note": "Blu-ray",
                        "release_date": "2008-10-14T00:00:00.000Z",
                        "type": 5,
                    },
                ],
            },
        ]
    },
    "videos": {
        "results": [
            {"key": "featurette1", "site": "YouTube", "type": "Featurette", "name": "Making of"},
            {"key": "vimeo1", "site": "Vimeo", "type": "Trailer", "name": "Trailer"},
            {"key": "m8e-FF8MsqU", "site": "YouTube", "type": "Trailer", "name": "Official Trailer"},
            {"key": "vKQi3bBA1y8", "site": "YouTube", "type": "Trailer", "name": "Trailer 2"},
        ]
    },
    "credits": {
        "cast": [
            {
                "id": 530,
                "name": "Carrie-Anne Moss",
                "credit_id": "52fe425bc3a36847f80181c1",
                "character": "Trinity",
                "order": 2,
                "profile_path": "/xD4jTA3KmVp5Rq3aHcymL9DUGjD.jpg",
            },
            {
                "id": 6384,
                "name": "Keanu Reeves",
                "credit_id": "52fe425bc3a36847f801818d",
                "character": "Neo",
                "order": 0,
                "profile_path": "/4D0PpNI0kmP58hgrwGC3wCjxhnm.jpg",
            },
            {
                "id": 2975,
                "name": "Laurence Fishburne",
                "credit_id": "52fe425bc3a36847f8018191",
                "character": "Morpheus",
                "order": 1,
                "profile_path": None,
            },
        ],
        "crew": [
            {
                "id": 9340,
                "name": "Lana Wachowski",
                "credit_id": "52fe425bc3a36847f80181a3",
                "department": "Directing",
                "job": "Director",
                "profile_path": "/5YlsC0R2jrBW0SkzsbGtDEfvCnB.jpg",
            },
            {
                "id": 9339,
                "name": "Lilly Wachowski",
                "credit_id": "52fe425bc3a36847f801819d",
                "department": "Directing",
                "job": "Director",
                "profile_path": None,
            },
        ],
    },
    "translations": {
        "translations": [
            {
                "iso_3166_1": "FR",
                "iso_639_1": "fr",
                "name": "Français",
                "english_name": "French",
                "data": {"title": "Matrix", "overview": "Programmeur anonyme...", "homepage": ""},
            },
            {
                "iso_3166_1": "DE",
                "iso_639_1": "de",
                "name": "Deutsch",
                "english_name": "German",
                "data": {"title": "Matrix", "overview": "", "homepage": ""},
            },
            {
                "iso_3166_1": "BR",
                "iso_639_1": "pt",
                "name": "Português",
                "english_name": "Portuguese",
                "data": {"title": "Matrix", "overview": "", "homepage": ""},
            },
            {
                "iso_3166_1": "IT",
                "iso_639_1": "it",
                "name": "Italiano",
                "english_name": "Italian",
                "data": {"title": "  ", "overview": "", "homepage": ""},
            },
        ]
    },
}

# Soft error: HTTP 200 carrying a TMDB status, resource deleted upstream
TMDB_DELETED_RESPONSE = {
    "success": False,
    "status_code": 34,
    "status_message": "The resource you requested could not be found.",
}

# Soft error with another TMDB status
TMDB_SOFT_ERROR_RESPONSE = {
    "success": False,
    "status_code": 25,
    "status_message": "Your request count (41) is over the allowed limit of 40.",
}

# Search response for "the matrix"
# GET /search/movie?query=the+matrix&year=&include_adult=false
TMDB_SEARCH_RESPONSE = {
    "page": 1,
    "results": [
        {
            "adult": False,
            "backdrop_path": "/fNG7i7RqMErkcqhohV2a6cV1Ehy.jpg",
            "genre_ids": [28, 878],
            "id": 603,
            "original_language": "en",
            "original_title": "The Matrix",
            "overview": "Set in the 22nd century, The Matrix tells the story of a computer hacker...",
            "popularity": 82.4,
            "poster_path": "/f89U3ADr1oiB1s9GkdPOEpXUk5H.jpg",
            "release_date": "1999-03-30",
            "title": "The Matrix",
            "video": False,
            "vote_average": 8.2,
            "vote_count": 24000,
        },
        {
            "adult": False,
            "backdrop_path": "/pxK1iK6anS6erGg4QePmMKbB1E7.jpg",
            "genre_ids": [12, 28, 53, 878],
            "id": 604,
            "original_language": "en",
            "original_title": "The Matrix Reloaded",
            "overview": "Six months after the events depicted in The Matrix...",
            "popularity": 40.1,
            "poster_path": "/9TGHDvWrqKBzwDxDodHYXEmOE6J.jpg",
            "release_date": "2003-05-15",
            "title": "The Matrix Reloaded",
            "video": False,
            "vote_average": 7.1,
            "vote_count": 10000,
        },
        {
            "adult": False,
            "backdrop_path": None,
            "genre_ids": [99],
            "id": 684731,
            "original_language": "en",
            "original_title": "The Matrix Untold",
            "overview": "",
            "popularity": 0.6,
            "poster_path": None,
            "release_date": "",
            "title": "The Matrix Untold",
            "video": False,
            "vote_average": 0.0,
            "vote_count": 0,
        },
    ],
    "total_pages": 1,
    "total_results": 3,
}

# Empty search response
TMDB_SEARCH_EMPTY_RESPONSE = {
    "page": 1,
    "results": [],
    "total_pages": 0,
    "total_results": 0,
}

# Find by IMDb ID
# GET /find/tt0133093?external_source=imdb_id
TMDB_FIND_RESPONSE = {
    "movie_results": [TMDB_SEARCH_RESPONSE["results"][0]],
    "person_results": [],
    "tv_results": [],
    "tv_episode_results": [],
    "tv_season_results": [],
}

TMDB_FIND_EMPTY_RESPONSE = {
    "movie_results": [],
    "person_results": [],
    "tv_results": [],
    "tv_episode_results": [],
    "tv_season_results": [],
}

# Changed movies
# GET /movie/changes?start_date=2024-01-01T00:00:00
TMDB_CHANGES_RESPONSE = {
    "results": [
        {"id": 603, "adult": False},
        {"id": 604, "adult": None},
        {"id": 603, "adult": False},
    ],
    "page": 1,
    "total_pages": 1,
    "total_results": 3,
}

# Discovery service candidates
# POST /discovery/upcoming (tmdbIds=...&ignoredIds=...)
DISCOVERY_RESPONSE = [
    {
        "id": 603,
        "title": "The Matrix",
        "release_date": "1999-03-30",
        "physical_release": "1999-09-21",
        "poster_path": "/f89U3ADr1oiB1s9GkdPOEpXUk5H.jpg",
        "vote_average": 8.2,
        "vote_count": 24000,
    },
    {
        "id": 11000,
        "title": "Neon Harbor",
        "overview": "A harbor city wakes up in neon.",
        "release_date": "2026-11-20",
        "physical_release": "2027-02-10",
        "physical_release_note": "Blu-ray",
        "poster_path": "/neonharbor.jpg",
        "vote_average": 0.0,
        "vote_count": 0,
        "trailer_key": "nh-trailer",
        "trailer_site": "youtube",
    },
    {
        "id": 11001,
        "title": "Quiet Orbit",
        "release_date": "2026-12-04",
        "poster_path": "",
        "trailer_key": "qo-trailer",
        "trailer_site": "YouTube",
    },
    {
        "id": 11002,
        "title": "Paper Lanterns",
        "release_date": "2027-01-15",
    },
]
