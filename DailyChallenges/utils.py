import logging

from django.conf import settings
from rest_framework.response import Response
from rest_framework import status
from groq import Groq


def create_response(success, message, body=None, status_code=status.HTTP_200_OK):
    try:
        response_data = {'success': success, 'message': message}
        if body is not None:
            response_data['body'] = body
        return Response(response_data, status=status_code)
    except Exception as e:
        error_message = f"Error creating response: {str(e)}"
        return Response({'success': False, 'message': error_message}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)


def generate_response_with_groq(messages, model=None, max_completion_tokens=None, temperature=None):
    """
    Run a single chat completion against Groq.

    Args:
        messages (list): Chat messages in the OpenAI-compatible format.
        model (str): Model name, defaults to settings.GROQ_MODEL.
        max_completion_tokens (int): Optional cap on the reply length.
        temperature (float): Optional sampling temperature.

    Returns:
        tuple:
            - content (str | None): The reply text, None when the call failed.
            - usage (dict | None): Token usage reported by the API.
    """
    try:
        model = model or settings.GROQ_MODEL
        api_key = settings.GROQ_API_KEY

        if not api_key:
            raise ValueError("API key is missing. Please set the GROQ_API_KEY environment variable.")

        client = Groq(api_key=api_key)

        request_args = {
            "messages": messages,
            "model": model,
        }
        if max_completion_tokens:
            request_args["max_completion_tokens"] = max_completion_tokens
        if temperature is not None:
            request_args["temperature"] = temperature

        chat_completion = client.chat.completions.create(**request_args)
        response_content = chat_completion.choices[0].message.content
        usage = chat_completion.usage
        return response_content, (usage.model_dump() if usage else None)

    except ValueError as ve:
        logging.warning(f"[generate_response_with_groq] {ve}")
        return None, None
    except Exception as e:
        logging.error(f"[generate_response_with_groq] Groq call failed: {e}")
        return None, None
