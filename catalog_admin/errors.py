"""
Error types and HTTP error pages
"""

from flask import render_template


class ValidationError(Exception):
    """Submitted form fields are missing or invalid.

    `errors` maps each offending field to a message for the form.
    """

    def __init__(self, errors):
        self.errors = errors
        super().__init__(', '.join(sorted(errors)))

    @property
    def fields(self):
        return sorted(self.errors)

    @property
    def message(self):
        return ' '.join(self.errors[field] for field in self.fields)


def register_error_handlers(app):
    @app.errorhandler(400)
    def bad_request(e):
        return render_template('errors/error.html', code=400, message="The request could not be understood."), 400

    @app.errorhandler(403)
    def forbidden(e):
        return render_template('errors/error.html', code=403, message="Access denied."), 403

    @app.errorhandler(404)
    def not_found(e):
        return render_template('errors/error.html', code=404, message="Page not found."), 404

    @app.errorhandler(413)
    def too_large(e):
        return render_template('errors/error.html', code=413, message="The uploaded file is too large."), 413

    @app.errorhandler(500)
    def server_error(e):
        return render_template('errors/error.html', code=500, message="Something broke on our end."), 500
