"""Built-in content used when the external data files cannot be loaded.

The shapes match ``data/activities.json`` and ``data/translations.json``.
"""

ACTIVITIES = {
    "activities": [
        {
            "id": 1,
            "description": {
                "en": "Fixing a server outage that is affecting customers",
                "pt": "Resolver uma falha no servidor que está afetando clientes",
            },
            "correctQuadrant": "q1",
        },
        {
            "id": 2,
            "description": {
                "en": "Finishing a report that is due this afternoon",
                "pt": "Terminar um relatório que vence hoje à tarde",
            },
            "correctQuadrant": "q1",
        },
        {
            "id": 3,
            "description": {
                "en": "Planning next quarter's goals",
                "pt": "Planejar as metas do próximo trimestre",
            },
            "correctQuadrant": "q2",
        },
        {
            "id": 4,
            "description": {
                "en": "Exercising regularly",
                "pt": "Praticar exercícios regularmente",
            },
            "correctQuadrant": "q2",
        },
        {
            "id": 5,
            "description": {
                "en": "Answering an unexpected sales call",
                "pt": "Atender uma ligação inesperada de vendas",
            },
            "correctQuadrant": "q3",
        },
        {
            "id": 6,
            "description": {
                "en": "Attending a meeting you are not needed in",
                "pt": "Participar de uma reunião em que você não é necessário",
            },
            "correctQuadrant": "q3",
        },
        {
            "id": 7,
            "description": {
                "en": "Scrolling through social media aimlessly",
                "pt": "Navegar sem rumo pelas redes sociais",
            },
            "correctQuadrant": "q4",
        },
        {
            "id": 8,
            "description": {
                "en": "Watching random videos online",
                "pt": "Assistir a vídeos aleatórios na internet",
            },
            "correctQuadrant": "q4",
        },
    ]
}

TRANSLATIONS = {
    "en": {
        "title": "Time Matrix Game",
        "subtitle": "Sort each activity into the right quadrant",
        "score_label": "Score",
        "progress_label": "Progress",
        "q1_title": "Q1 (Important & Urgent)",
        "q1_examples": "Crises, deadlines, pressing problems",
        "q2_title": "Q2 (Important & Not Urgent)",
        "q2_examples": "Planning, prevention, relationships, learning",
        "q3_title": "Q3 (Not Important & Urgent)",
        "q3_examples": "Interruptions, some calls and meetings",
        "q4_title": "Q4 (Not Important & Not Urgent)",
        "q4_examples": "Trivia, busywork, time wasters",
        "correct_feedback": "Correct! Well done!",
        "incorrect_feedback": "Incorrect. This activity belongs in {quadrant}.",
        "game_complete": "Game Complete!",
        "final_score": "Final Score: {score} / {total}",
        "accuracy": "Accuracy: {accuracy}%",
        "play_again": "Press r to play again",
        "key_help": "1-4 answer · l language · r restart · q quit",
        "language_label": "Language",
        "error_empty": "No activities available. The quiz cannot start.",
    },
    "pt": {
        "title": "Jogo da Matriz do Tempo",
        "subtitle": "Classifique cada atividade no quadrante correto",
        "score_label": "Pontuação",
        "progress_label": "Progresso",
        "q1_title": "Q1 (Importante e Urgente)",
        "q1_examples": "Crises, prazos, problemas urgentes",
        "q2_title": "Q2 (Importante e Não Urgente)",
        "q2_examples": "Planejamento, prevenção, relacionamentos, aprendizado",
        "q3_title": "Q3 (Não Importante e Urgente)",
        "q3_examples": "Interrupções, algumas ligações e reuniões",
        "q4_title": "Q4 (Não Importante e Não Urgente)",
        "q4_examples": "Trivialidades, tarefas inúteis, desperdício de tempo",
        "correct_feedback": "Correto! Muito bem!",
        "incorrect_feedback": "Incorreto. Esta atividade pertence a {quadrant}.",
        "game_complete": "Jogo Concluído!",
        "final_score": "Pontuação Final: {score} / {total}",
        "accuracy": "Precisão: {accuracy}%",
        "play_again": "Pressione r para jogar novamente",
        "key_help": "1-4 responder · l idioma · r reiniciar · q sair",
        "language_label": "Idioma",
        "error_empty": "Nenhuma atividade disponível. O quiz não pode começar.",
    },
}
