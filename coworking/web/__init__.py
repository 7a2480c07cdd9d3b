"""HTTP layer: request models, error-to-status mapping, handlers and the Flask app."""