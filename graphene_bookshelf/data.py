authors = {
    "data": [
        {"id": "1", "name": "J.K. Rowling"},
        {"id": "2", "name": "George R.R. Martin"},
        {"id": "3", "name": "J.R.R. Tolkien"},
        {"id": "4", "name": "Stephen King"},
        {"id": "5", "name": "Agatha Christie"},
    ]
}

books = {
    "data": [
        {
            "id": "1",
            "title": "Harry Potter and the Philosopher's Stone",
            "author_id": "1",
            "published_year": 1997,
        },
        {
            "id": "2",
            "title": "Harry Potter and the Chamber of Secrets",
            "author_id": "1",
            "published_year": 1998,
        },
        {
            "id": "3",
            "title": "A Game of Thrones",
            "author_id": "2",
            "published_year": 1996,
        },
        {
            "id": "4",
            "title": "A Clash of Kings",
            "author_id": "2",
            "published_year": 1998,
        },
        {
            "id": "5",
            "title": "The Hobbit",
            "author_id": "3",
            "published_year": 1937,
        },
        {
            "id": "6",
            "title": "The Lord of the Rings",
            "author_id": "3",
            "published_year": 1954,
        },
        {
            "id": "7",
            "title": "The Shining",
            "author_id": "4",
            "published_year": 1977,
        },
        {
            "id": "8",
            "title": "It",
            "author_id": "4",
            "published_year": 1986,
        },
        {
            "id": "9",
            "title": "Murder on the Orient Express",
            "author_id": "5",
            "published_year": 1934,
        },
        {
            "id": "10",
            "title": "The Murder of Roger Ackroyd",
            "author_id": "5",
            "published_year": 1926,
        },
    ]
}
