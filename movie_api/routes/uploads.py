from flask import Blueprint, current_app, send_from_directory

uploads_router = Blueprint('uploads', __name__)

@uploads_router.get('/uploads/<container>/<path:filename>')
def read_uploaded_file(container, filename):
    return send_from_directory(current_app.config["UPLOAD_FOLDER"], f"{container}/{filename}")
