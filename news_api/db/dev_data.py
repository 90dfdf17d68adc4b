# news_api/db/dev_data.py
from datetime import datetime

_IMG = "https://images.pexels.com/photos/158651/news-newsletter-newspaper-information-158651.jpeg?w=700&h=700"

TOPICS = [
    {"slug": "mitch", "description": "The man, the Mitch, the legend"},
    {"slug": "cats", "description": "Not dogs"},
    {"slug": "paper", "description": "what books are made of"},
]

USERS = [
    {
        "username": "butter_bridge",
        "name": "jonny",
        "avatar_url": "https://www.healthytherapies.com/wp-content/uploads/2016/06/Lime3.jpg",
    },
    {
        "username": "icellusedkars",
        "name": "sam",
        "avatar_url": "https://avatars2.githubusercontent.com/u/24604688?s=460&v=4",
    },
    {
        "username": "rogersop",
        "name": "paul",
        "avatar_url": "https://avatars2.githubusercontent.com/u/24394918?s=400&v=4",
    },
    {
        "username": "lurker",
        "name": "do_nothing",
        "avatar_url": "https://www.golenbock.com/wp-content/uploads/2015/01/placeholder-user.png",
    },
]


def _article(article_id, title, topic, author, body, created_at, votes=0):
    return {
        "article_id": article_id,
        "title": title,
        "topic": topic,
        "author": author,
        "body": body,
        "created_at": created_at,
        "votes": votes,
        "article_img_url": _IMG,
    }


ARTICLES = [
    _article(1, "Living in the shadow of a great man", "mitch", "butter_bridge",
             "I find this existence challenging", datetime(2020, 7, 9, 20, 11), votes=100),
    _article(2, "Sony Vaio; or, The Laptop", "mitch", "icellusedkars",
             "Call me Mitchell. Some years ago, never mind how long precisely, I thought I would buy a laptop.",
             datetime(2020, 10, 16, 5, 3)),
    _article(3, "Eight pug gifs that remind me of mitch", "mitch", "icellusedkars",
             "some gifs", datetime(2020, 11, 3, 9, 12)),
    _article(4, "Student SUES Mitch!", "mitch", "rogersop",
             "We all love Mitch and his wonderful, unique typing style.", datetime(2020, 5, 6, 1, 14)),
    _article(5, "UNCOVERED: catspiracy to bring down democracy", "cats", "rogersop",
             "Bastet walks amongst us, and the cats are taking arms!", datetime(2020, 8, 3, 13, 14)),
    _article(6, "A", "mitch", "icellusedkars",
             "Delicious tin of cat food", datetime(2020, 10, 18, 1, 0)),
    _article(7, "Z", "mitch", "icellusedkars",
             "I was hungry.", datetime(2020, 1, 7, 14, 8)),
    _article(8, "Does Mitch predate civilisation?", "mitch", "icellusedkars",
             "Archaeologists have uncovered a gigantic statue from the dawn of humanity.",
             datetime(2020, 4, 17, 1, 8)),
    _article(9, "They're not exactly dogs, are they?", "mitch", "butter_bridge",
             "Well? Think about it.", datetime(2020, 6, 6, 9, 10)),
    _article(10, "Seven inspirational thought leaders from Manchester UK", "mitch", "rogersop",
             "Who are we kidding, there is only one, and it's Mitch!", datetime(2020, 5, 14, 4, 15)),
    _article(11, "Am I a cat?", "mitch", "icellusedkars",
             "Having run out of ideas for articles, I am staring at the wall blankly, like a cat. "
             "Does this make me a cat?", datetime(2020, 1, 15, 22, 21)),
    _article(12, "Moustache", "mitch", "butter_bridge",
             "Have you seen the size of that thing?", datetime(2020, 10, 11, 11, 24)),
    _article(13, "Another article about Mitch", "mitch", "butter_bridge",
             "There will never be enough articles about Mitch!", datetime(2020, 10, 11, 11, 24)),
]


def _comment(comment_id, article_id, author, body, created_at, votes=0):
    return {
        "comment_id": comment_id,
        "article_id": article_id,
        "author": author,
        "body": body,
        "votes": votes,
        "created_at": created_at,
    }


COMMENTS = [
    _comment(1, 9, "butter_bridge",
             "Oh, I've got compassion running out of my nose, pal! I'm the Sultan of Sentiment!",
             datetime(2020, 4, 6, 12, 17), votes=16),
    _comment(2, 1, "butter_bridge",
             "The beautiful thing about treasure is that it exists. Got to find out what kind of sheets "
             "these are; not cotton, not rayon, silky.", datetime(2020, 10, 31, 3, 3), votes=14),
    _comment(3, 1, "icellusedkars",
             "Replacing the quiet elegance of the dark suit and tie with the casual indifference of these "
             "muted earth tones is a form of fashion suicide.", datetime(2020, 3, 1, 1, 13), votes=100),
    _comment(4, 1, "icellusedkars",
             "I carry a log, yes. Is it funny to you? It is not to me.", datetime(2020, 2, 23, 12, 1), votes=-100),
    _comment(5, 1, "icellusedkars", "I hate streaming noses", datetime(2020, 11, 3, 21, 0)),
    _comment(6, 1, "icellusedkars", "I hate streaming eyes even more", datetime(2020, 4, 11, 21, 2)),
    _comment(7, 1, "icellusedkars", "Lobster pot", datetime(2020, 5, 15, 20, 19)),
    _comment(8, 1, "icellusedkars", "Delicious crackerbreads", datetime(2020, 4, 14, 20, 19)),
    _comment(9, 1, "icellusedkars", "Superficially charming", datetime(2020, 1, 1, 3, 8)),
    _comment(10, 3, "icellusedkars", "git push origin master", datetime(2020, 6, 20, 7, 24)),
    _comment(11, 3, "icellusedkars", "Ambidextrous marsupial", datetime(2020, 9, 19, 23, 10)),
    _comment(12, 1, "icellusedkars", "Massive intercranial brain haemorrhage", datetime(2020, 3, 2, 7, 10)),
    _comment(13, 1, "icellusedkars", "Fruit pastilles", datetime(2020, 6, 15, 10, 25)),
    _comment(14, 5, "icellusedkars",
             "What do you see? I have no idea where this will lead us. This place I speak of, "
             "is known as the Black Lodge.", datetime(2020, 6, 9, 5, 0), votes=16),
    _comment(15, 5, "butter_bridge", "I am 100% sure that we're not completely sure.",
             datetime(2020, 11, 24, 0, 8), votes=1),
    _comment(16, 6, "butter_bridge", "This is a bad article name", datetime(2020, 10, 11, 15, 23), votes=1),
    _comment(17, 9, "icellusedkars", "The owls are not what they seem.", datetime(2020, 3, 14, 17, 2), votes=20),
    _comment(18, 1, "butter_bridge", "This morning, I showered for nine minutes.",
             datetime(2020, 7, 21, 0, 20), votes=16),
]
