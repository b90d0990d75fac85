from flask import Blueprint, request
from controllers.movie_controller import (
    show_movies,
    vote_for_movie,
    add_movie,
    delete_movie,
    get_standings
)

movie_bp = Blueprint('movies', __name__)

@movie_bp.route('/vote', methods=['GET'])
def vote_page():
    return show_movies(request)

@movie_bp.route('/vote/<movie_id>', methods=['POST'])
def vote_route(movie_id):
    return vote_for_movie(movie_id)

@movie_bp.route('/add-movie', methods=['POST'])
def add_movie_route():
    return add_movie(request)

@movie_bp.route('/delete-movie/<movie_id>', methods=['GET'])
def delete_movie_route(movie_id):
    return delete_movie(movie_id)

@movie_bp.route('/api/movies', methods=['GET'])
def standings_route():
    return get_standings(request)
