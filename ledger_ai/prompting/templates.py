"""Default Jinja2 prompt templates for the categorizer.

Both templates receive the same context: ``category_groups``, ``transaction``,
``manual_transactions`` and ``override_transactions``. Amounts are in minor units.
"""

DEFAULT_PROMPT_TEMPLATE = """I want to categorize the given bank transaction into one of the following categories:
{% for group in category_groups %}
GROUP: {{ group.name }} (ID: "{{ group.id }}")
{% for category in group.categories %}
* {{ category.name }} (ID: "{{ category.id }}")
{% endfor %}
{% endfor %}
{% if override_transactions %}
Transactions that were previously miscategorized and then corrected by me:
{% for txn in override_transactions %}
* {{ txn.type }} of {{ "%.2f"|format(txn.amount / 100) }} at "{{ txn.payee }}"{% if txn.description %} ({{ txn.description }}){% endif %} -> "{{ txn.category }}" (ID: "{{ txn.category_id }}")
{% endfor %}
{% endif %}
Please categorize the following transaction:
* Amount: {{ "%.2f"|format(transaction.amount / 100) }}
* Type: {{ transaction.type }}
{% if transaction.description %}* Description: {{ transaction.description }}
{% endif %}{% if transaction.payee %}* Payee: {{ transaction.payee }}
{% endif %}* Date: {{ transaction.date }}

ANSWER BY A CATEGORY ID. DO NOT WRITE THE WHOLE SENTENCE. Do not guess, if you don't know the answer, return "uncategorized".
"""

DEFAULT_MANUAL_PROMPT_TEMPLATE = """I want to categorize the given bank transaction into one of the following categories:
{% for group in category_groups %}
GROUP: {{ group.name }} (ID: "{{ group.id }}")
{% for category in group.categories %}
* {{ category.name }} (ID: "{{ category.id }}")
{% endfor %}
{% endfor %}
Here are transactions I categorized myself, use them to learn my preferences:
{% for txn in manual_transactions + override_transactions %}
* {{ txn.type }} of {{ "%.2f"|format(txn.amount / 100) }} at "{{ txn.payee }}"{% if txn.description %} ({{ txn.description }}){% endif %} -> "{{ txn.category }}" (ID: "{{ txn.category_id }}")
{% else %}
* (none yet)
{% endfor %}

Please categorize the following transaction:
* Amount: {{ "%.2f"|format(transaction.amount / 100) }}
* Type: {{ transaction.type }}
{% if transaction.description %}* Description: {{ transaction.description }}
{% endif %}{% if transaction.payee %}* Payee: {{ transaction.payee }}
{% endif %}* Date: {{ transaction.date }}

Pick the category whose examples are the closest match. ANSWER BY A CATEGORY ID ONLY.
If none of the categories fit, return "uncategorized".
"""
