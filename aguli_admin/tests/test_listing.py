from aguli_admin.services.listing import filter_explore_posts, format_timestamp, paginate, sort_ads

POSTS = [
    {"explore_title": "Flood relief in Guwahati", "explore_status": "active"},
    {"explore_title": "Bihu celebrations", "explore_status": "inactive"},
    {"explore_title": "FLOOD warnings", "explore_status": "inactive"},
]

def test_search_is_case_insensitive():
    assert len(filter_explore_posts(POSTS, "flood")) == 2

def test_status_filter():
    assert [p["explore_title"] for p in filter_explore_posts(POSTS, "", "inactive")] == ["Bihu celebrations", "FLOOD warnings"]
    assert len(filter_explore_posts(POSTS, "", "all")) == 3

def test_paginate_clamps_page():
    items = list(range(25))
    page = paginate(items, 3, 12)
    assert page["items"] == [24]
    assert page["total_pages"] == 3
    assert paginate(items, 99, 12)["page"] == 3
    assert paginate([], 1, 12)["total_pages"] == 1

def test_ads_sorted_by_sequence():
    ads = [{"ads_sequence": 3}, {"ads_sequence": "1"}, {"ads_sequence": None}]
    assert [a["ads_sequence"] for a in sort_ads(ads)] == [None, "1", 3]

def test_format_timestamp():
    assert format_timestamp("2024-05-01T10:00:00Z", "UTC") == "01 May 2024, 10:00"
    assert format_timestamp("2024-05-01T10:00:00Z", "Asia/Kolkata") == "01 May 2024, 15:30"
    assert format_timestamp("yesterday") == "yesterday"
    assert format_timestamp(None) == ""
