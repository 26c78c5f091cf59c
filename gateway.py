"""
AI gateway client.

Sends chat-style prompts to the hosted LLM gateway (OpenAI-compatible
chat completions) or, when AI_PROVIDER=gemini, straight to Gemini through
google-generativeai. Replies are plain text; callers pull a JSON object out
of them with extract_json().
"""
import json
import logging
import re

import requests
import google.generativeai as genai
from google.api_core import exceptions as google_exceptions
from flask import current_app

logger = logging.getLogger(__name__)

RATE_LIMITED_MESSAGE = "Rate limit exceeded. Please try again later."
UNAVAILABLE_MESSAGE = "Service temporarily unavailable. Please try again later."
FAILED_MESSAGE = "Failed to get AI response"

JSON_OBJECT_RE = re.compile(r'\{[\s\S]*\}')
JSON_FENCE_RE = re.compile(r'```json\n?([\s\S]*?)\n?```')
DATA_URL_RE = re.compile(r'^data:(?P<mime>[\w/+.-]+);base64,(?P<data>.+)$', re.DOTALL)


class GatewayError(Exception):
    """An upstream AI failure, carrying the HTTP status to hand back to the caller."""

    def __init__(self, message, status=500):
        super().__init__(message)
        self.message = message
        self.status = status


class ConfigurationError(GatewayError):
    def __init__(self, message):
        super().__init__(message, 500)


class NoJsonFound(ValueError):
    pass


def error_for_status(status_code):
    if status_code == 429:
        return GatewayError(RATE_LIMITED_MESSAGE, 429)
    if status_code == 402:
        return GatewayError(UNAVAILABLE_MESSAGE, 402)
    return GatewayError(FAILED_MESSAGE, 500)


def extract_json(content, allow_fence=False):
    """
    Pulls the first JSON object out of a free-text reply.

    With allow_fence, a ```json fenced block wins over a bare {...} match and
    the whole reply is tried when neither is present.
    Raises NoJsonFound when there is nothing to parse and ValueError when the
    candidate text is not valid JSON.
    """
    content = content or ""
    candidate = None
    if allow_fence:
        fenced = JSON_FENCE_RE.search(content)
        if fenced:
            candidate = fenced.group(1)
    if candidate is None:
        match = JSON_OBJECT_RE.search(content)
        if match:
            candidate = match.group(0)
        elif allow_fence:
            candidate = content
        else:
            raise NoJsonFound("No JSON found in response")
    parsed = json.loads(candidate)
    if not isinstance(parsed, dict):
        raise ValueError("Expected a JSON object")
    return parsed


def image_message(text, image_data_url):
    """User message with a text part and an inline image (data URL)."""
    return {
        'role': 'user',
        'content': [
            {'type': 'text', 'text': text},
            {'type': 'image_url', 'image_url': {'url': image_data_url}},
        ],
    }


def chat_completion(messages, model=None, temperature=None, max_tokens=None):
    """Returns the text of the first completion choice ("" when empty)."""
    config = current_app.config
    if config.get('AI_PROVIDER') == 'gemini':
        return _gemini_completion(messages, config['GEMINI_MODEL'])
    return _gateway_completion(messages, model or config['AI_GATEWAY_MODEL'],
                               temperature, max_tokens)


def _gateway_completion(messages, model, temperature, max_tokens):
    config = current_app.config
    api_key = config.get('AI_GATEWAY_API_KEY')
    if not api_key:
        raise ConfigurationError("AI_GATEWAY_API_KEY is not configured")

    payload = {"model": model, "messages": messages}
    if temperature is not None:
        payload["temperature"] = temperature
    if max_tokens is not None:
        payload["max_tokens"] = max_tokens

    try:
        response = requests.post(
            config['AI_GATEWAY_URL'],
            json=payload,
            headers={
                "Authorization": f"Bearer {api_key}",
                "Content-Type": "application/json",
            },
            timeout=config.get('AI_REQUEST_TIMEOUT', 60),
        )
    except requests.exceptions.RequestException as e:
        logger.error(f"AI gateway request failed: {e}")
        raise GatewayError(FAILED_MESSAGE, 500) from e

    if not response.ok:
        logger.error(f"AI gateway error: {response.status_code} {response.text}")
        raise error_for_status(response.status_code)

    try:
        data = response.json()
        return data['choices'][0]['message']['content'] or ""
    except (ValueError, KeyError, IndexError, TypeError) as e:
        logger.error(f"Unexpected AI gateway payload: {e}")
        return ""


def _gemini_parts(content):
    if isinstance(content, str):
        return [content]
    parts = []
    for part in content:
        if part.get('type') == 'text':
            parts.append(part['text'])
        elif part.get('type') == 'image_url':
            match = DATA_URL_RE.match(part['image_url']['url'])
            if not match:
                raise GatewayError("Image must be a base64 data URL", 400)
            parts.append({
                'inline_data': {
                    'data': match.group('data'),
                    'mime_type': match.group('mime'),
                }
            })
    return parts


def _gemini_completion(messages, model_name):
    config = current_app.config
    api_key = config.get('GOOGLE_API_KEY')
    if not api_key:
        raise ConfigurationError("GOOGLE_API_KEY is not configured")

    system_text = "\n\n".join(m['content'] for m in messages if m['role'] == 'system')
    contents = []
    for m in messages:
        if m['role'] != 'system':
            contents.extend(_gemini_parts(m['content']))

    genai.configure(api_key=api_key)
    model = genai.GenerativeModel(model_name=model_name,
                                  system_instruction=system_text or None)
    try:
        response = model.generate_content(contents=contents)
        return response.text or ""
    except google_exceptions.ResourceExhausted as e:
        logger.error(f"Gemini quota exhausted: {e}")
        raise GatewayError(RATE_LIMITED_MESSAGE, 429) from e
    except google_exceptions.PermissionDenied as e:
        logger.error(f"Gemini permission denied: {e}")
        raise GatewayError(UNAVAILABLE_MESSAGE, 402) from e
    except (google_exceptions.GoogleAPIError, ValueError) as e:
        logger.error(f"Gemini API error: {e}")
        raise GatewayError(FAILED_MESSAGE, 500) from e
