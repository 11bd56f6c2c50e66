from abc import ABC, abstractmethod

class AiohttpServiceInterface(ABC):
    @abstractmethod
    async def get(self, url: str, headers: dict = None, params: dict = None):
        """
        Sends an asynchronous GET request to the given URL with optional headers and query parameters.

        :param url: The URL to send the GET request to
        :param headers: Optional dictionary of headers to include in the request
        :param params: Optional dictionary of query parameters to include in the request
        :return: The decoded JSON body
        :raises aiohttp.ClientError: On connection problems and non-2xx statuses
        """
        pass

    @abstractmethod
    async def post(self, url: str, payload) -> dict:
        """
        Sends an asynchronous POST request to the given URL with the provided JSON payload.

        :param url: The URL to send the POST request to
        :param payload: The JSON payload to send in the POST request
        :return: The decoded JSON body, None when the response carries no JSON
        :raises aiohttp.ClientError: On connection problems and non-2xx statuses
        """
        pass

    @abstractmethod
    async def post_file(self, url: str, field: str, data: bytes, filename: str, content_type: str) -> tuple:
        """
        Sends a multipart POST request carrying a single file.

        :param url: The URL to send the file to
        :param field: Name of the form field holding the file
        :param data: File content
        :param filename: Name reported for the file
        :param content_type: MIME type of the file
        :return: Tuple of the response status and the decoded JSON body
        """
        pass

    @abstractmethod
    async def close(self) -> None:
        pass
