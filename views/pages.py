from flask import render_template_string

STYLE = """
    <style>
        body { font-family: Arial, sans-serif; max-width: 700px; margin: 0 auto; padding: 20px; }
        h1, h2 { color: #333; }
        h1 { text-align: center; }
        button, .button { background-color: #4CAF50; color: white; padding: 6px 12px; border: none; cursor: pointer; text-decoration: none; }
        button:hover, .button:hover { background-color: #45a049; }
        .delete { background-color: #c0392b; }
        .error { color: red; }
        .success { color: green; }
        .status { background-color: #fff3cd; padding: 10px; border-radius: 5px; margin-bottom: 20px; }
        .movie { display: flex; justify-content: space-between; align-items: center; padding: 8px; margin: 5px 0; background-color: #e8f4f8; border-radius: 5px; }
        .movie form { display: inline; }
        input[type="text"] { width: 70%; padding: 8px; }
    </style>
"""

LOGIN_TEMPLATE = """
<!DOCTYPE html>
<html>
<head>
    <title>Movie Night Vote</title>
""" + STYLE + """
</head>
<body>
    <h1>Movie Night Vote</h1>
    <p>Suggest one movie and vote for the one you want to watch.</p>
    {% if logged_in %}
    <p><a class="button" href="{{ url_for('movies.vote_page') }}">Continue to voting</a></p>
    {% else %}
    <p><a class="button" href="{{ url_for('auth.login_route', provider=provider) }}">Log in with {{ provider }}</a></p>
    {% endif %}
</body>
</html>
"""

VOTE_TEMPLATE = """
<!DOCTYPE html>
<html>
<head>
    <title>Vote for a Movie</title>
""" + STYLE + """
</head>
<body>
    <h1>Vote for a Movie</h1>
    <p>Logged in as <strong>{{ login }}</strong> &middot; <a href="{{ url_for('auth.logout_route') }}">Log out</a></p>

    {% if message %}
    <div class="{% if message_type == 'error' %}error{% else %}success{% endif %}">
        {{ message }}
    </div>
    {% endif %}

    <div class="status">
        {% if status.suggested %}
        You suggested <strong>{{ status.suggested.title }}</strong>, which also carries your vote.
        {% elif status.voted %}
        Your vote goes to <strong>{{ status.voted.title }}</strong>.
        {% else %}
        You have not voted yet.
        {% endif %}
    </div>

    {% for movie in movies %}
    <div class="movie">
        <span>{{ movie.title }} - Votes: {{ movie.votes }}</span>
        <span>
            <form action="{{ url_for('movies.vote_route', movie_id=movie.id|string) }}" method="post">
                <input type="hidden" name="csrf_token" value="{{ csrf_token }}">
                <button type="submit">{% if movie.has_voter(user_id) %}Retract vote{% else %}Vote{% endif %}</button>
            </form>
            {% if movie.is_created_by(user_id) %}
            <a class="button delete" href="{{ url_for('movies.delete_movie_route', movie_id=movie.id|string) }}">Delete</a>
            {% endif %}
        </span>
    </div>
    {% else %}
    <p>No movies have been suggested yet.</p>
    {% endfor %}

    {% if not status.suggested %}
    <h2>Suggest a New Movie</h2>
    <form action="{{ url_for('movies.add_movie_route') }}" method="post">
        <input type="hidden" name="csrf_token" value="{{ csrf_token }}">
        <input type="text" name="movieName" placeholder="Enter movie name" required>
        <button type="submit">Suggest</button>
    </form>
    {% endif %}
</body>
</html>
"""

MESSAGE_TEMPLATE = """
<!DOCTYPE html>
<html>
<head>
    <title>Movie Night Vote</title>
""" + STYLE + """
</head>
<body>
    <h1>Movie Night Vote</h1>
    <p class="error">{{ message }}</p>
    <p><a href="{{ url_for('movies.vote_page') }}">Back to the movie list</a></p>
</body>
</html>
"""


def render_login(provider, logged_in=False):
    return render_template_string(LOGIN_TEMPLATE, provider=provider, logged_in=logged_in)


def render_vote(movies, user_id, login, status, csrf_token='', message=None, message_type='success'):
    return render_template_string(
        VOTE_TEMPLATE,
        movies=movies,
        user_id=user_id,
        login=login,
        status=status,
        csrf_token=csrf_token or '',
        message=message,
        message_type=message_type,
    )


def render_message(message):
    return render_template_string(MESSAGE_TEMPLATE, message=message)
