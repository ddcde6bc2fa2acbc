import logging
import os

from contact_book import create_app

app = create_app()

if __name__ == '__main__':
    logging.basicConfig(level=app.config['LOG_LEVEL'], format='%(asctime)s %(levelname)s %(name)s: %(message)s')
    app.run(host='0.0.0.0', port=int(os.environ.get('PORT', 5000)))
