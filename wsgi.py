from dotenv import load_dotenv

load_dotenv()

from nubevdc import create_app
from nubevdc.config import ProductionConfig

app = create_app(ProductionConfig)

if __name__ == '__main__':
    app.run()
