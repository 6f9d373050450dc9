"""
Shared response fixtures for the HN Reader tests.
"""

import json

import pytest

STORY_PAGE_HTML = """
<html><body>
<table id="hnmain"><tr><td>
<table border="0" cellpadding="0" cellspacing="0" class="itemlist">
  <tr class="athing" id="24261826">
    <td align="right" valign="top" class="title"><span class="rank">1.</span></td>
    <td valign="top" class="votelinks"><center><a id="up_24261826" href="vote?id=24261826&amp;how=up&amp;goto=news"><div class="votearrow" title="upvote"></div></a></center></td>
    <td class="title"><a href="https://example.com/a" class="storylink">Show HN: A thing I built</a></td>
  </tr>
  <tr>
    <td colspan="2"></td>
    <td class="subtext">
      <span class="score" id="score_24261826">123 points</span> by <a href="user?id=alice" class="hnuser">alice</a>
      <span class="age" title="2020-08-23T10:11:12"><a href="item?id=24261826">2 hours ago</a></span>
      <span id="unv_24261826"></span> | <a href="hide?id=24261826&amp;goto=news">hide</a> |
      <a href="item?id=24261826">45&nbsp;comments</a>
    </td>
  </tr>
  <tr class="spacer" style="height:5px"></tr>
  <tr class="athing" id="24261900">
    <td align="right" valign="top" class="title"><span class="rank">2.</span></td>
    <td valign="top" class="votelinks"><center><a id="up_24261900" href="vote?id=24261900&amp;how=up&amp;goto=news"><div class="votearrow" title="upvote"></div></a></center></td>
    <td class="title"><a href="item?id=24261900" class="storylink">Ask HN: How do you test parsers?</a></td>
  </tr>
  <tr>
    <td colspan="2"></td>
    <td class="subtext">
      <span class="score" id="score_24261900">1 point</span> by <a href="user?id=bob" class="hnuser">bob</a>
      <span class="age" title="2020-08-23T09:00:00"><a href="item?id=24261900">3 hours ago</a></span>
      | <a href="hide?id=24261900&amp;goto=news">hide</a> | <a href="item?id=24261900">discussion</a>
    </td>
  </tr>
  <tr class="spacer" style="height:5px"></tr>
  <tr class="athing" id="24262000">
    <td align="right" valign="top" class="title"><span class="rank">3.</span></td>
    <td></td>
    <td class="title"><a href="https://jobs.example.com" class="storylink">Example Corp is hiring</a></td>
  </tr>
  <tr>
    <td colspan="2"></td>
    <td class="subtext">
      <span class="age" title="not a date"><a href="item?id=24262000">1 day ago</a></span>
    </td>
  </tr>
  <tr class="morespace" style="height:10px"></tr>
  <tr>
    <td colspan="2"></td>
    <td class="title"><a href="news?p=2" class="morelink" rel="next">More</a></td>
  </tr>
</table>
</td></tr></table>
</body></html>
"""

CURRENT_STORY_PAGE_HTML = """
<html><body>
<table id="hnmain">
<tr id="bigbox"><td>
<table border="0" cellpadding="0" cellspacing="0">
  <tr class="athing submission" id="38937650">
    <td align="right" valign="top" class="title"><span class="rank">31.</span></td>
    <td valign="top" class="votelinks"><center><a id="up_38937650" href="vote?id=38937650&amp;how=up&amp;goto=news%3Fp%3D2"><div class="votearrow" title="upvote"></div></a></center></td>
    <td class="title"><span class="titleline"><a href="https://example.org/post">A post on page two</a><span class="sitebit comhead"> (<a href="from?site=example.org"><span class="sitestr">example.org</span></a>)</span></span></td>
  </tr>
  <tr>
    <td colspan="2"></td>
    <td class="subtext"><span class="subline">
      <span class="score" id="score_38937650">87 points</span> by <a href="user?id=carol" class="hnuser">carol</a>
      <span class="age" title="2024-01-10T12:34:56 1704890096"><a href="item?id=38937650">5 hours ago</a></span>
      <span id="unv_38937650"></span> | <a href="hide?id=38937650&amp;goto=news%3Fp%3D2">hide</a> |
      <a href="item?id=38937650">1&nbsp;comment</a>
    </span></td>
  </tr>
  <tr class="spacer" style="height:5px"></tr>
  <tr class="morespace" style="height:10px"></tr>
  <tr>
    <td colspan="2"></td>
    <td class="title"><a href="?p=3&amp;next=38937650" class="morelink" rel="next">More</a></td>
  </tr>
</table>
</td></tr>
</table>
</body></html>
"""

SEARCH_RESPONSE = {
    "hits": [
        {
            "created_at": "2020-08-23T10:11:12.000Z",
            "title": "Show HN: Search result",
            "url": "https://example.com/search",
            "author": "alice",
            "points": 42,
            "story_text": None,
            "num_comments": 7,
            "created_at_i": 1598177472,
            "objectID": "24261826",
        },
        {
            "created_at": "2020-08-22T08:00:00.000Z",
            "title": "Ask HN: Older result",
            "url": None,
            "author": "bob",
            "points": 3,
            "story_text": "What do you use?",
            "num_comments": None,
            "created_at_i": 1598083200,
            "objectID": "24250000",
        },
        {
            "created_at": "2020-08-21T08:00:00.000Z",
            "author": "mallory",
            "points": 1,
            "objectID": "24240000",
        },
    ]
}

COMMENT_RESPONSE = {
    "id": 24261826,
    "created_at": "2020-08-23T10:11:12.000Z",
    "author": "alice",
    "title": "Show HN: Search result",
    "children": [
        {
            "id": 101,
            "created_at": "2020-08-23T10:20:00.000Z",
            "author": "bob",
            "text": "<p>First!</p>",
            "parent_id": 24261826,
            "story_id": 24261826,
            "children": [
                {
                    "id": 102,
                    "created_at": "2020-08-23T10:25:00.000Z",
                    "author": "carol",
                    "text": "Reply to bob",
                    "parent_id": 101,
                    "story_id": 24261826,
                    "children": [],
                },
                None,
                {"id": "not-a-number", "created_at": "2020-08-23T10:26:00.000Z"},
            ],
        },
        {
            "id": 103,
            "created_at": "2020-08-23T11:00:00.000Z",
            "author": None,
            "text": None,
            "parent_id": 24261826,
            "story_id": 24261826,
            "children": [
                {
                    "id": 104,
                    "created_at": "2020-08-23T11:05:00.000Z",
                    "author": "dave",
                    "text": "Reply to a deleted comment",
                    "parent_id": 103,
                    "story_id": 24261826,
                    "children": [],
                },
            ],
        },
        "garbage",
        {"id": 105, "author": "erin"},
    ],
}


@pytest.fixture
def story_page_html():
    return STORY_PAGE_HTML


@pytest.fixture
def current_story_page_html():
    return CURRENT_STORY_PAGE_HTML


@pytest.fixture
def search_json():
    return json.dumps(SEARCH_RESPONSE).encode("utf-8")


@pytest.fixture
def comment_json():
    return json.dumps(COMMENT_RESPONSE).encode("utf-8")
