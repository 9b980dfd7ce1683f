"""Texts for the status messages shown while traffic is being observed."""

from __future__ import annotations

from collections.abc import Mapping

from sniffnet.language import Language

L = Language

# Lines of the Persian waiting message keep their own line breaks and indentation.
_FA_INDENT = " " * 32


def _pick(table: Mapping[Language, str], language: Language) -> str:
    """Return the entry for ``language``."""
    return table[language]


_NO_ADDRESSES = {
    L.EN: "No traffic can be observed because the adapter you selected has no active addresses...\n\n"
    "Network adapter: {adapter}\n\n"
    "If you are sure you are connected to the internet, try choosing a different adapter.",
    L.IT: "Non è osservabile alcun traffico perché l'adattatore di rete selezionato non ha indirizzi attivi...\n\n"
    "Adattatore di rete: {adapter}\n\n"
    "Se sei sicuro di essere connesso ad internet, prova a scegliere un adattatore diverso.",
    L.FR: "Aucun trafic ne peut être observé, car la carte réseau que vous avez saisie n'a pas d'adresse...\n\n"
    "Carte réseau : {adapter}\n\n"
    "Si vous êtes sûr d'être connecté à internet, essayez une autre carte.",
    L.ES: "No se puede observar ningún tráfico porque el adaptador seleccionado no tiene direcciones activas...\n\n"
    "Adaptador de red : {adapter}\n\n"
    "Si estás seguro de que estás conectado a Internet, prueba a elegir otro adaptador.",
    L.PL: "Nie można zaobserwować żadnego ruchu, ponieważ wybrany adapter nie ma aktywnych adresów...\n\n"
    "Adapter sieciowy: {adapter}\n\n"
    "Jeśli jesteś pewien, że jesteś podłączony do internetu, spróbuj wybrać inny adapter.",
    L.DE: "Es kann kein Netzwerkverkehr beobachtet werden, weil der Adapter keine aktiven Adressen hat...\n\n"
    "Netzwerkadapter: {adapter}\n\n"
    "Wenn du dir sicher bist, dass du mit dem Internet verbunden bist, probier einen anderen Adapter auszuwählen.",
    L.UK: "Не зафіксовано жодного мережевого трафіку тому що вибраний адаптер немає активних адрес... \n\n"
    "Мережквий адаптер: {adapter}\n\n"
    "Якщо Ти впевнений, що підключений до інтернету, спробуй вибрати інший адаптер.",
    L.ZH: "您选择的网络适配器当前无活动网络...\n\n"
    "网络适配器: {adapter}\n\n"
    "如果您确信您已成功连接互联网, 请尝试选择其他网络适配器.",
    L.RO: "Niciun trafic nu poate fi observat deoarece adaptorul selectat nu are adrese active...\n\n"
    "Adaptor de rețea: {adapter}\n\n"
    "Dacă sunteți sigur că sunteți conectat la internet, încercați să alegeți un alt adaptor.",
    L.KO: "선택한 어댑터에 유효한 주소가 없기 때문에 트래픽을 확인할 수 없습니다...\n\n"
    "네트워크 어뎁터: {adapter}\n\n"
    "인터넷이 연결되어있다면 다른 어댑터로 시도해보세요.",
    L.TR: "Seçtiğiniz adaptör aktif bir adrese sahip olmadığı için hiç bir trafik izlenemez...\n\n"
    "Ağ adaptörü: {adapter}\n\n"
    "Eğer gerçekten internete bağlı olduğunuza eminseniz, başka bir adaptör seçmeyi deneyiniz.",
    L.RU: "Наблюдение за трафиком не возможно, потому что Вы выбрали интерфейс без активного адреса...\n\n"
    "Сетевой интерфейс: {adapter}\n\n"
    "Если Вы уверены, что подключены к Интернету, попробуйте выбрать другой интерфейс.",
    L.PT: "Não é possível observar tráfego porque o adaptador que selecionou não tem endereços ativos...\n\n"
    "Adaptador de rede: {adapter}\n\n"
    "Se tiver a certeza que está ligado à internet, tente escolher um adaptador diferente.",
    L.EL: "Δεν μπορεί να ανιχνευθεί κίνηση επειδή ο προσαρμογέας που επέλεξες δεν έχει ενεργές διευθύνσεις...\n\n"
    "Προσαρμογέας δικτύου: {adapter}\n\n"
    "Αν είσαι σίγουρος ότι είσαι συνδεδεμένος στο διαδίκτυο, δοκίμασε αν επιλέξεις έναν διαφορετικό προσαρμογέα.",
    L.FA: "هیچ آمد و شدی قابل مشاهده نیست چون مبدلی که انتخاب کرده اید هیچ نشانی فعالی ندارد...\n\n"
    "مبدل شبکه: {adapter}\n\n"
    "اگر مطمئن هستید به اینترنت وصل هستید، سعی کنید مبدل متفاوتی را انتخاب کنید.",
    L.SV: "Det går inte att observa någon trafik eftersom den valda adaptern inte har några aktiva adresser ...\n\n"
    "Nätverksadapter: {adapter}\n\n"
    "Om du är säker att du är ansluten till internet, testa att välja en annan adapter.",
}

_WAITING = {
    L.EN: "No traffic has been observed yet. Waiting for network packets...\n\n"
    "Network adapter: {adapter}\n\n"
    "Are you sure you are connected to the internet and you have selected the correct adapter?",
    L.IT: "Nessun tipo di traffico è stato osservato finora. Attendo pacchetti di rete...\n\n"
    "Adattatore di rete: {adapter}\n\n"
    "Sei sicuro di esser connesso ad internet e di aver selezionato l'adattatore corretto?",
    L.FR: "Aucun trafic n'a été capturé pour le moment. En attente de paquets...\n\n"
    "Carte réseau : {adapter}\n\n"
    "Êtes-vous sûr d'être connecté à internet et d'avoir selectionné la bonne carte réseau ?",
    L.ES: "Aún no se ha captado tráfico. Esperando paquetes...\n\n"
    "Adaptador de red : {adapter}\n\n"
    "¿Está seguro de que está conectado a Internet y ha seleccionado la tarjeta de red correcta?",
    L.PL: "Nie zaobserowano żadnego ruchu sieciowego. Oczekiwanie na pakiety...\n\n"
    "Adapter sieciowy: {adapter}\n\n"
    "Czy na pewno jesteś podłączony do internetu i wybrałeś właściwy adapter?",
    L.DE: "Noch kein Netzwerkverkehr beobachtet. Warte auf Pakete...\n\n"
    "Netzwerkadapter: {adapter}\n\n"
    "Bist du sicher, dass du mit dem Internet verbunden bist und den richtigen Adapter ausgewählt hast?",
    L.UK: "Не зафіксовано жодного мережевого трафіку. Очікування на пакети...\n\n"
    "Мережквий адаптер: {adapter}\n\n"
    "Чи Ти дійсно підключений до інтернету і вибрав відповідний мережевий адаптер?",
    L.ZH: "暂无流量数据. 等待网络活动中......\n\n"
    "网络适配器: {adapter}\n\n"
    "您确信您已成功连接到互联网, 并选择了当前正在使用的的网络适配器吗?",
    L.RO: "Nu a fost observat încă trafic. Se așteaptă pachetele de rețea...\n\n"
    "Adaptor de rețea: {adapter}\n\n"
    "Ești sigur că ești conectat la internet și ai selectat adaptorul corect?",
    L.KO: "아직 트래픽이 관찰되지 않았습니다. 네트워크 패킷 대기 중...\n\n"
    "네트워크 어뎁터: {adapter}\n\n"
    "인터넷에 연결되어 있고 올바른 어댑터를 선택하셨습니까?",
    L.TR: "Henüz bir trafik algılanamadı. Ağ paketleri için bekleniyor...\n\n"
    "Ağ adaptörü: {adapter}\n\n"
    "İnternete bağlı olduğunuza ve doğru adaptörü seçtiğinize emin misiniz?",
    L.RU: "Трафик не обнаружен. Ожидаем сетевые пакеты...\n\n"
    "Сетевой интерфейс: {adapter}\n\n"
    "Вы уверены, что подключены к Интернету и выбрали правильный интерфейс?",
    L.PT: "Ainda não foi observado tráfego. Aguardando por pacotes...\n\n"
    "Adaptador de rede: {adapter}\n\n"
    "Tem a certeza de que está ligado à internet e selecionou o adaptador correto?",
    L.EL: "Δεν έχει παρατηρηθεί κίνηση μέχρι στιγμής. Ανέμενε για πακέτα δικτύου...\n\n"
    "Προσαρμογέας δικτύου: {adapter}\n\n"
    "Είσαι σίγουρος ότι είσαι συνδεδεμένος στο διαδίκτυο και ότι έχεις επιλέξει τον σωστό προσαρμογέα;",
    L.FA: "هنوز هیچ آمد و شدی مشاهده نشده است. در حال انتظار برای بسته های شبکه...\n\n\n"
    + _FA_INDENT
    + "مبدل شبکه: {adapter}\n\n\n"
    + _FA_INDENT
    + "آیا مطمئن هستید به اینترنت وصل هستید و مبدل درست را انتخاب کرده اید؟",
    L.SV: "Ingen trafik har observerats ännu. Väntar på paket ...\n\n"
    "Nätverksadapter: {adapter}\n\n"
    "Är du säker på att du är ansluten till internet och att du har valt rätt adapter?",
}

_SOME_OBSERVED = {
    L.EN: "Total intercepted packets: {observed}\n\n"
    "Filtered packets: 0\n\n"
    "Some packets have been intercepted, but still none has been selected according to the filters you specified...\n\n{filters}",
    L.IT: "Totale pacchetti intercettati: {observed}\n\n"
    "Pacchetti filtrati: 0\n\n"
    "Alcuni pacchetti sono stati intercettati, ma ancora nessuno è stato selezionato secondo i filtri specificati...\n\n{filters}",
    L.FR: "Total des paquets interceptés: {observed}\n\n"
    "Paquets filtrés: 0\n\n"
    "Certains paquets ont été interceptés, mais aucun ne satisfait les critères des filtres sélectionnés...\n\n{filters}",
    L.ES: "Total de paquetes interceptados: {observed}\n\n"
    "Paquetes filtrados: 0\n\n"
    "Se interceptaron algunos paquetes, pero ninguno de ellos cumplía los criterios de los filtros seleccionados...\n\n{filters}",
    L.PL: "Suma przechwyconych pakietów: {observed}\n\n"
    "Przefiltrowane pakiety: 0\n\n"
    "Niektóre pakiety zostały przechwycone, ale żaden nie został wybrany zgodnie z wskazanymi filtrami...\n\n{filters}",
    L.DE: "Anzahl der empfangenen Pakete: {observed}\n\n"
    "Gefilterte Pakete: 0\n\n"
    "Ein Paar Pakete wurden empfangen, aber es entsprechen noch keine den spezifizierten Filtern...\n\n{filters}",
    L.UK: "Сума перехоплених пакетів: {observed}\n\n"
    "Відфільтровані пакеті: 0\n\n"
    "Деякі пакети були перехоплені, але жоден з них не був вибраний відповідно до вказаних фільтрів...\n\n{filters}",
    L.ZH: "监测到的数据包总数: {observed}\n\n"
    "目标数据包总数: 0\n\n"
    "当前已监测到一些数据包, 但其中并未包含您的目标数据包......\n\n{filters}",
    L.RO: "Total pachete interceptate: {observed}\n\n"
    "Pachete filtrate: 0\n\n"
    "Unele pachete au fost interceptate, dar încă niciunul nu a fost selectat conform filtrelor pe care le-ați specificat...\n\n{filters}",
    L.KO: "감지한 총 패킷: {observed}\n\n"
    "필터링된 패킷: 0\n\n"
    "일부 패킷이 감지되었지만, 지정한 필터에 따라 선택되지 않았습니다...\n\n{filters}",
    L.TR: "Toplam yakalanan paketler: {observed}\n\n"
    "Filterelenen paketler: 0\n\n"
    "Bazı paketler yakalandı, fakat belirttiğiniz filtrelere göre hiç biri seçilmedi...\n\n{filters}",
    L.RU: "Всего пакетов перехвачено: {observed}\n\n"
    "Фильтровано пакетов: 0\n\n"
    "Сетевые пакеты были перехвачены, но ни один из них не соответствует заданным фильтрам...\n\n{filters}",
    L.PT: "Total de pacotes interceptados: {observed}\n\n"
    "Pacotes filtrados: 0\n\n"
    "Alguns pacotes foram interceptados, mas nenhum deles foi selecionado de acordo com os filtros especificados...\n\n{filters}",
    L.EL: "Συνολικά αναχαιτισμένα πακέτα: {observed}\n\n"
    "Φιλτραρισμένα πακέτα: 0\n\n"
    "Κάποια από τα πακέτα έχουν αναχαιτιστεί, αλλά κανένα ακόμη δεν έχει επιλεγεί σύμφωνα με τα φίλτρα που επέλεξες...\n\n{filters}",
    L.FA: "مجموع بسته های رهگیری شده: {observed}\n\n"
    "بسته های صاف شده: 0\n\n"
    "شماری از بسته ها رهگیری شده اند، ولی هنوز هیچ کدام بر اساس صافی تعیین شده شما انتخاب نشده اند...\n\n{filters}",
    L.SV: "Antal fångade paket: {observed}\n\n"
    "Filtrerade paket: 0\n\n"
    "Några paket har fångats, men än har inget valts enligt de angivna filtren ...\n\n{filters}",
}

_FILTERED_PACKETS = {
    L.EN: "Filtered packets",
    L.IT: "Pacchetti filtrati",
    L.FR: "Paquets filtrés",
    L.ES: "Paquetes filtrados",
    L.PL: "Przefiltrowane pakiety",
    L.DE: "Gefilterte Pakete",
    L.UK: "Відфільтровані пакети",
    L.ZH: "目标数据包计数",
    L.RO: "Pachete filtrate",
    L.KO: "필터링된 패킷",
    L.TR: "Filtrelenen paketler",
    L.RU: "Отфильтровано пакетов",
    L.PT: "Pacotes filtrados",
    L.EL: "Φιλτραρισμένα πακέτα",
    L.FA: "بسته های صاف شده",
    L.SV: "Filtrerade paket",
}

_FILTERED_BYTES = {
    L.EN: "Filtered bytes",
    L.IT: "Byte filtrati",
    L.FR: "Octets filtrés",
    L.ES: "Bytes filtrados",
    L.PT: "Bytes filtrados",
    L.PL: "Przechwycone bajty",
    L.DE: "Gefilterte Bytes",
    L.UK: "Відфільтровані байти",
    L.ZH: "目标网络流量计数",
    L.RO: "Octeți filtrați",
    L.KO: "필터링된 바이트",
    L.TR: "Filtrelenen bayt",
    L.RU: "Отфильтровано байт",
    L.EL: "Φιλτραρισμένα bytes",
    L.FA: "بایت های صاف شده",
    L.SV: "Filtrerade bytes",
}

_OF_TOTAL = {
    L.EN: "({percentage} of the total)",
    L.IT: "({percentage} del totale)",
    L.FR: "({percentage} du total)",
    L.ES: "({percentage} del total)",
    L.PL: "({percentage} z całości)",
    L.DE: "({percentage} der Gesamtzahl)",
    L.UK: "({percentage} від загальної суми)",
    L.ZH: "(占所有数据包的 {percentage})",
    L.RO: "({percentage} din total)",
    L.KO: "({percentage} 의 일부)",
    L.TR: "toplamın ({percentage})",
    L.RU: "({percentage} от общего числа)",
    L.PT: "({percentage} do total)",
    L.EL: "({percentage} από τα συνολικά)",
    L.FA: "({percentage} از مجموع)",
    L.SV: "({percentage} av totalen)",
}

_ERROR = {
    L.EN: "An error occurred! \n\n{error}",
    L.IT: "Si è verificato un errore! \n\n{error}",
    L.FR: "Une erreur est survenue! \n\n{error}",
    L.ES: "¡Se ha producido un error! \n\n{error}",
    L.PL: "Wystąpił błąd! \n\n{error}",
    L.DE: "Es ist ein Fehler aufgetreten! \n\n{error}",
    L.UK: "Виступила помилка! \n\n{error}",
    L.ZH: "发生了一些错误! \n\n{error}",
    L.RO: "A apărut o eroare! \n\n{error}",
    L.KO: "오류가 발생하였습니다! \n\n{error}",
    L.TR: "Bir hata oluştu! \n\n{error}",
    L.RU: "Произошла ошибка! \n\n{error}",
    L.PT: "Ocorreu um erro! \n\n{error}",
    L.EL: "Κάποιο σφάλμα συνέβη! \n\n{error}",
    L.FA: "خطایی رخ داد! \n\n{error}",
    L.SV: "Ett fel inträffade! \n\n{error}",
}


def no_addresses_translation(language: Language, adapter: str) -> str:
    """Explain that the chosen adapter has no active addresses."""
    return _pick(_NO_ADDRESSES, language).format(adapter=adapter)


def waiting_translation(language: Language, adapter: str) -> str:
    """Explain that no packet has been seen yet on the chosen adapter."""
    return _pick(_WAITING, language).format(adapter=adapter)


def some_observed_translation(language: Language, observed: str, filters: str) -> str:
    """Explain that packets were seen but none matched the active filters."""
    return _pick(_SOME_OBSERVED, language).format(observed=observed, filters=filters)


def filtered_packets_translation(language: Language) -> str:
    return _pick(_FILTERED_PACKETS, language)


def filtered_bytes_translation(language: Language) -> str:
    return _pick(_FILTERED_BYTES, language)


def of_total_translation(language: Language, percentage: str) -> str:
    """Describe ``percentage`` as a share of the whole traffic."""
    return _pick(_OF_TOTAL, language).format(percentage=percentage)


def error_translation(language: Language, error: str) -> str:
    """Announce that an error occurred, followed by its description."""
    return _pick(_ERROR, language).format(error=error)