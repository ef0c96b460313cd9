class Validator:
    @staticmethod
    def validate_query(data):
        """Return an error message for a bad /api/ai body, or None if it is usable."""
        if not isinstance(data, dict):
            return "query is required"
        query = data.get('query')
        if not query or not isinstance(query, str):
            return "query is required"
        return None
