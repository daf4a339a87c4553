# articles_api/db/queries.py
"""SQL statements issued against the ``articles`` table."""

CREATE_ARTICLES_TABLE = """
    CREATE TABLE IF NOT EXISTS articles (
        id SERIAL PRIMARY KEY,
        title TEXT NOT NULL,
        content TEXT NOT NULL,
        author TEXT NOT NULL
    )
"""

SELECT_ALL_ARTICLES = "SELECT * FROM articles ORDER BY id ASC"

COUNT_BY_TITLE = "SELECT COUNT(id) AS count FROM articles WHERE title = $1"

INSERT_ARTICLE = """
    INSERT INTO articles (title, content, author)
    VALUES ($1, $2, $3)
    RETURNING *
"""

UPDATE_ARTICLE = """
    UPDATE articles
    SET title = $2, content = $3, author = $4
    WHERE id = $1
    RETURNING *
"""

UPDATE_ARTICLE_TITLE = "UPDATE articles SET title = $2 WHERE id = $1 RETURNING *"

DELETE_ARTICLE = "DELETE FROM articles WHERE id = $1 RETURNING *"
