from flask import Blueprint, request
from controllers.auth_controller import login_page, begin_login, complete_login, logout

auth_bp = Blueprint('auth', __name__)

@auth_bp.route('/', methods=['GET'])
def index_route():
    return login_page(request)

@auth_bp.route('/auth/<provider>', methods=['GET'])
def login_route(provider):
    return begin_login(provider)

@auth_bp.route('/auth/<provider>/callback', methods=['GET'])
def callback_route(provider):
    return complete_login(request, provider)

@auth_bp.route('/logout', methods=['GET'])
def logout_route():
    return logout(request)
