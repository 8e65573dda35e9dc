import logging
import requests
import urllib3

from .documents import wrap_document

# Silencia avisos de certificado auto-assinado (comum em laboratórios vCloud)
urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)

AUTH_HEADER = 'x-vcloud-authorization'


class Connection:
    """
    Transporte HTTP do vCloud Director.
    Só sabe fazer GET/POST/DELETE e devolver o documento embrulhado.
    Erros HTTP sobem como requests.HTTPError, sem tradução.
    """

    def __init__(self, host, user=None, org=None, password=None, token=None,
                 api_version='5.1', verify_ssl=False, timeout=30):
        base = host if host.startswith('http') else f"https://{host}"
        self.api_url = f"{base.rstrip('/')}/api"
        self.user = user
        self.org = org
        self.password = password
        self.timeout = timeout
        self.logger = logging.getLogger(__name__)

        self.session = requests.Session()
        self.session.verify = verify_ssl
        self.session.headers['Accept'] = f"application/*+xml;version={api_version}"
        if token:
            self.session.headers[AUTH_HEADER] = token

    @property
    def is_authenticated(self):
        return AUTH_HEADER in self.session.headers

    def login(self):
        """Abre a sessão com user@org e guarda o token devolvido."""
        response = self.session.post(
            f"{self.api_url}/sessions",
            auth=(f"{self.user}@{self.org}", self.password),
            timeout=self.timeout
        )
        response.raise_for_status()
        self.session.headers[AUTH_HEADER] = response.headers[AUTH_HEADER]
        self.logger.info(f"Sessão vCloud aberta para {self.user}@{self.org}.")
        return self._wrap(response)

    def _request(self, method, href, **kwargs):
        self.logger.debug(f"{method} {href}")
        response = self.session.request(method, href, timeout=self.timeout, **kwargs)
        response.raise_for_status()
        return response

    def _wrap(self, response):
        if not response.content:
            return None
        return wrap_document(response.content)

    def get(self, href):
        return self._wrap(self._request('GET', href))

    def post(self, href, payload, content_type):
        return self._wrap(self._request(
            'POST', href, data=payload, headers={'Content-Type': content_type}
        ))

    def delete(self, href):
        return self._wrap(self._request('DELETE', href))
